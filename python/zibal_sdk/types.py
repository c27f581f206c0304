"""
Location: python/zibal_sdk/types.py

Summary:
    Pydantic models for the Zibal wire format. Defines the two outbound
    bodies (payment request, verification) and the two inbound responses.

Usage:
    Used by client.py to build request bodies and by transport.py to
    decode gateway responses. Field names on the wire are camelCase;
    the Python attributes are snake_case via aliases.

    Amounts are integers in the smallest currency unit (Rial).

Example:
    from zibal_sdk.types import RequestResponse

    response = RequestResponse.model_validate_json(
        b'{"result": 100, "message": "ok", "trackId": 4242}'
    )
    assert response.track_id == 4242
    print(response.result_status)
"""

from typing import Optional

from pydantic import BaseModel, Field, StrictInt

from .status import Status, StatusField


class RequestBody(BaseModel):
    """
    Body of a payment initiation request.

    Attributes:
        merchant: Merchant identifier issued by Zibal
        callback_url: URL the user is sent back to after paying
        amount: Amount in Rial
        mobile: Optional payer mobile number
        description: Optional free text description
        order_id: Optional merchant side order identifier
    """
    merchant: str
    callback_url: str = Field(alias="callbackUrl")
    amount: StrictInt
    mobile: Optional[str] = None
    description: Optional[str] = None
    order_id: Optional[str] = Field(None, alias="orderId")

    model_config = {"populate_by_name": True}


class VerifyBody(BaseModel):
    """Body of a payment verification request."""
    merchant: str
    track_id: StrictInt = Field(alias="trackId")

    model_config = {"populate_by_name": True}


class RequestResponse(BaseModel):
    """
    Gateway response to a payment initiation request.

    `result` is kept as the raw integer; `result_status` interprets it on
    access, so an unknown code never fails parsing.

    Attributes:
        result: Raw result code
        message: Gateway message
        track_id: Identifier of the payment attempt, present on success
    """
    result: int
    message: str
    track_id: Optional[int] = Field(None, alias="trackId")

    model_config = {"populate_by_name": True}

    @property
    def result_status(self) -> Optional[Status]:
        """Decoded `result`, or None if the code is unknown."""
        return Status.decode(self.result)


class VerifyResponse(BaseModel):
    """
    Gateway response to a payment verification request.

    Unlike `result`, the `status` field is decoded while parsing: an
    unknown status code fails validation of the whole response.

    Attributes:
        result: Raw result code
        message: Gateway message
        paid_at: Payment timestamp as sent by the gateway
        amount: Paid amount in Rial
        status: Payment status
    """
    result: int
    message: str
    paid_at: Optional[str] = Field(None, alias="paidAt")
    amount: Optional[int] = None
    status: Optional[StatusField] = None

    model_config = {"populate_by_name": True}

    @property
    def result_status(self) -> Optional[Status]:
        """Decoded `result`, or None if the code is unknown."""
        return Status.decode(self.result)

"""
Location: python/zibal_sdk/status.py

Summary:
    Result codes returned by the Zibal gateway. Maps the integer wire code
    onto a closed set of named outcomes and back, with the gateway's fixed
    human readable message for each outcome.

Usage:
    Used by types.py to interpret the `result` and `status` fields of
    gateway responses. `StatusField` embeds a status directly in a
    pydantic model.

Example:
    from zibal_sdk.status import Status, StatusKind

    status = Status.decode(1)
    assert status == Status.paid(verified=True)
    assert status.code == 1
    print(status.message)
"""

from enum import Enum
from typing import Annotated, Any, Optional

from pydantic import BaseModel, PlainSerializer, PlainValidator, model_validator
from pydantic_core import PydanticCustomError


class StatusKind(str, Enum):
    """Named outcome variants. `PAID` is the only one carrying data."""

    # payment (verify) statuses
    WAITING = "waiting"
    INTERNAL_ERROR = "internal_error"
    PAID = "paid"
    CANCELLED_BY_USER = "cancelled_by_user"
    INVALID_CARD_NUMBER = "invalid_card_number"
    INSUFFICIENT_CREDIT = "insufficient_credit"
    WRONG_PASSWORD = "wrong_password"
    EXCEEDED_REQUEST_LIMIT = "exceeded_request_limit"
    EXCEEDED_PAYMENT_LIMIT = "exceeded_payment_limit"
    EXCEEDED_PAYMENT_AMOUNT = "exceeded_payment_amount"
    INVALID_CARD_ISSUER = "invalid_card_issuer"
    SWITCH_FAILURE = "switch_failure"
    INACCESSIBLE_CARD = "inaccessible_card"
    # request/verify result statuses
    CONFIRMED = "confirmed"
    MERCHANT_NOT_FOUND = "merchant_not_found"
    MERCHANT_INACTIVE = "merchant_inactive"
    MERCHANT_INVALID = "merchant_invalid"
    INVALID_AMOUNT_VALUE = "invalid_amount_value"
    INVALID_CALLBACK_URL = "invalid_callback_url"
    ALREADY_CONFIRMED = "already_confirmed"
    INCOMPLETE_PAYMENT = "incomplete_payment"
    INVALID_TRACK_ID = "invalid_track_id"


class Status(BaseModel):
    """
    A gateway outcome.

    Two statuses are equal when both kind and payload match, so
    `Status.paid(True) != Status.paid(False)`.

    Attributes:
        kind: The outcome variant
        verified: Whether a paid transaction was verified, only set for PAID
    """

    kind: StatusKind
    verified: Optional[bool] = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_verified_payload(self) -> "Status":
        if (self.kind is StatusKind.PAID) != (self.verified is not None):
            raise ValueError("verified must be set for paid statuses and only for them")
        return self

    @classmethod
    def of(cls, kind: StatusKind) -> "Status":
        """Build a status for a variant without payload."""
        return cls(kind=kind)

    @classmethod
    def paid(cls, verified: bool) -> "Status":
        return cls(kind=StatusKind.PAID, verified=verified)

    @classmethod
    def decode(cls, code: int) -> Optional["Status"]:
        """
        Map a wire code onto a status.

        Args:
            code: Integer result code from the gateway

        Returns:
            The matching Status, or None if the code is not a known code
        """
        if isinstance(code, bool) or not isinstance(code, int):
            return None
        return _BY_CODE.get(code)

    def encode(self) -> int:
        return _BY_STATUS[self]

    @property
    def code(self) -> int:
        """Integer wire code of this status."""
        return self.encode()

    @property
    def message(self) -> str:
        """Gateway message for this status (Persian)."""
        return _MESSAGES[self.code]

    @property
    def is_paid(self) -> bool:
        return self.kind is StatusKind.PAID

    def __str__(self) -> str:
        if self.is_paid:
            return f"paid(verified={self.verified})"
        return self.kind.value


_BY_CODE: dict[int, Status] = {
    -1: Status.of(StatusKind.WAITING),
    -2: Status.of(StatusKind.INTERNAL_ERROR),
    1: Status.paid(verified=True),
    2: Status.paid(verified=False),
    3: Status.of(StatusKind.CANCELLED_BY_USER),
    4: Status.of(StatusKind.INVALID_CARD_NUMBER),
    5: Status.of(StatusKind.INSUFFICIENT_CREDIT),
    6: Status.of(StatusKind.WRONG_PASSWORD),
    7: Status.of(StatusKind.EXCEEDED_REQUEST_LIMIT),
    8: Status.of(StatusKind.EXCEEDED_PAYMENT_LIMIT),
    9: Status.of(StatusKind.EXCEEDED_PAYMENT_AMOUNT),
    10: Status.of(StatusKind.INVALID_CARD_ISSUER),
    11: Status.of(StatusKind.SWITCH_FAILURE),
    12: Status.of(StatusKind.INACCESSIBLE_CARD),
    100: Status.of(StatusKind.CONFIRMED),
    102: Status.of(StatusKind.MERCHANT_NOT_FOUND),
    103: Status.of(StatusKind.MERCHANT_INACTIVE),
    104: Status.of(StatusKind.MERCHANT_INVALID),
    105: Status.of(StatusKind.INVALID_AMOUNT_VALUE),
    106: Status.of(StatusKind.INVALID_CALLBACK_URL),
    201: Status.of(StatusKind.ALREADY_CONFIRMED),
    202: Status.of(StatusKind.INCOMPLETE_PAYMENT),
    203: Status.of(StatusKind.INVALID_TRACK_ID),
}

_BY_STATUS: dict[Status, int] = {status: code for code, status in _BY_CODE.items()}

_MESSAGES: dict[int, str] = {
    -1: "در انتظار پردخت",
    -2: "خطای داخلی",
    1: "پرداخت شده - تاییدشده",
    2: "پرداخت شده - تاییدنشده",
    3: "لغوشده توسط کاربر",
    4: "شماره کارت نامعتبر می‌باشد",
    5: "موجودی حساب کافی نمی‌باشد",
    6: "رمز واردشده اشتباه می‌باشد",
    7: "تعداد درخواست‌ها بیش از حد مجاز می‌باشد",
    8: "تعداد پرداخت اینترنتی روزانه بیش از حد مجاز می‌باشد",
    9: "مبلغ پرداخت اینترنتی روزانه بیش از حد مجاز می‌باشد",
    10: "صادرکننده‌ی کارت نامعتبر می‌باشد",
    11: "خطای سوییچ",
    12: "کارت قابل دسترسی نمی‌باشد",
    100: "با موفقیت تایید شد",
    102: "{merchant} یافت نشد",
    103: "{merchant} غیرفعال",
    104: "{merchant} نامعتبر",
    105: "{amount} بایستی بزرگتر از 1,000 ریال باشد",
    106: "{callbackUrl} نامعتبر می‌باشد (شروع با http و یا https)",
    201: "قبلا تایید شده",
    202: "سفارش پرداخت نشده یا ناموفق بوده است",
    203: "{trackId} نامعتبر می‌باشد",
}

# Every known code
STATUS_CODES: tuple[int, ...] = tuple(_BY_CODE)


def _parse_status(value: Any) -> Status:
    if isinstance(value, Status):
        return value
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    status = Status.decode(value)
    if status is None:
        raise PydanticCustomError(
            "invalid_status_code",
            "Invalid status code: {code}",
            {"code": value},
        )
    return status


StatusField = Annotated[
    Status,
    PlainValidator(_parse_status),
    PlainSerializer(lambda status: status.code, return_type=int),
]

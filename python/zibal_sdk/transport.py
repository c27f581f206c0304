"""
Location: python/zibal_sdk/transport.py

Summary:
    One JSON-over-HTTP exchange with the Zibal gateway: encode the
    outbound body, POST it, decode the response and classify any failure
    into a single ZibalError.

Usage:
    Used by client.py. Each call to exchange() issues at most one POST
    and never retries.

Example:
    transport = GatewayTransport(http, "https://gateway.zibal.ir", logger)
    result = await transport.exchange("verify", body, VerifyResponse)
"""

from typing import Optional, TypeVar

import httpx
from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from .errors import (
    BadBodyError,
    BadResponseDataError,
    BadResponseError,
    BadURLError,
    InvalidStatusCodeError,
    ZibalError,
)
from .logging import GatewayLogger
from .result import Failure, Result, Success

ResponseT = TypeVar("ResponseT", bound=BaseModel)

JSON_HEADERS = {"Content-Type": "application/json"}


def build_url(base_url: str, path: str) -> Optional[httpx.URL]:
    """
    Join the gateway base URL and an endpoint path.

    Returns:
        The absolute URL, or None if it cannot be parsed
    """
    try:
        url = httpx.URL(f"{base_url.rstrip('/')}/{path.lstrip('/')}")
    except httpx.InvalidURL:
        return None
    if not url.is_absolute_url:
        return None
    return url


def encode_body(body: BaseModel) -> bytes:
    """Serialise an outbound model to JSON, camelCase keys, None fields dropped."""
    return body.model_dump_json(by_alias=True, exclude_none=True).encode()


def decode_body(data: bytes, response_type: type[ResponseT]) -> ResponseT:
    """
    Parse a response body into `response_type`.

    Raises:
        InvalidStatusCodeError: If an embedded status field holds an unknown code
        BadResponseDataError: If the body is not JSON of the expected shape
    """
    try:
        return response_type.model_validate_json(data)
    except ValidationError as exc:
        for error in exc.errors():
            if error["type"] == "invalid_status_code":
                raise InvalidStatusCodeError(error.get("ctx", {}).get("code")) from exc
        raise BadResponseDataError(data) from exc


class GatewayTransport:
    """
    Performs single exchanges against the gateway.

    Attributes:
        base_url: Gateway base URL
        logger: Log sink gated by the configured level
    """

    def __init__(self, http: httpx.AsyncClient, base_url: str, logger: GatewayLogger):
        self._http = http
        self.base_url = base_url
        self.logger = logger

    async def exchange(
        self,
        path: str,
        body: BaseModel,
        response_type: type[ResponseT],
    ) -> Result[ResponseT]:
        """
        POST `body` to `path` and parse the answer as `response_type`.

        Args:
            path: Endpoint path relative to the base URL
            body: Outbound wire model
            response_type: Inbound wire model class

        Returns:
            Success with the parsed body, or Failure with exactly one error
        """
        url = build_url(self.base_url, path)
        if url is None:
            return self._fail(BadURLError(f"{self.base_url}/{path}"))

        try:
            payload = encode_body(body)
        except PydanticSerializationError:
            return self._fail(BadBodyError(body))

        self.logger.info("gateway.request", path=path, url=str(url), size=len(payload))
        try:
            response = await self._http.post(url, content=payload, headers=JSON_HEADERS)
        except httpx.HTTPError as exc:
            self.logger.error("gateway.transport_failed", path=path, exc_info=exc)
            return self._fail(BadResponseError())

        self.logger.info(
            "gateway.response",
            path=path,
            status_code=response.status_code,
            size=len(response.content),
        )
        if response.is_error or not response.content:
            return self._fail(BadResponseError(response), response)

        try:
            parsed = decode_body(response.content, response_type)
        except ZibalError as error:
            return self._fail(error, response)

        return Success(parsed, response)

    def _fail(self, error: ZibalError, response: Optional[httpx.Response] = None) -> Failure:
        self.logger.error("gateway.failed", code=error.code, error=type(error).__name__)
        return Failure(error, response)

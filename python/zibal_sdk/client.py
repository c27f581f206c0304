"""
Location: python/zibal_sdk/client.py

Summary:
    Main ZibalClient class for the zibal-sdk. Starts payments, verifies
    them and builds the URL the payer is redirected to.

Usage:
    The primary entry point for using the SDK. Create a ZibalClient with
    a ZibalConfig (or initialize the process-wide one), then await
    request_payment() and verify_payment(). Every call returns a Result
    holding either the parsed response or exactly one ZibalError.

Example:
    from zibal_sdk import ZibalClient, ZibalConfig

    config = ZibalConfig.create("zibal", "https://shop.example.com/callback")

    async with ZibalClient(config) as client:
        result = await client.request_payment(1500, order_id="A-17")
        if result.ok:
            print(client.start_url(result.body.track_id))
"""

from typing import Any, Callable, Optional

import httpx
from pydantic import BaseModel, ValidationError

from .config import LogLevel, ZibalConfig, get_config
from .errors import BadBodyError, BadResponseError, InvalidConfigError
from .logging import GatewayLogger
from .result import Failure, Result
from .transport import GatewayTransport, ResponseT, build_url
from .types import RequestBody, RequestResponse, VerifyBody, VerifyResponse

DEFAULT_BASE_URL = "https://gateway.zibal.ir"


class ZibalClient:
    """
    Zibal payment gateway client.

    Attributes:
        base_url: Gateway base URL (trailing slash removed)
        timeout: Request timeout in seconds
        default_headers: Headers to include on all requests
    """

    def __init__(
        self,
        config: Optional[ZibalConfig] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        headers: Optional[dict[str, str]] = None,
    ):
        """
        Initialize the ZibalClient.

        Args:
            config: Merchant configuration; when None the process-wide
                configuration from initialize() is read on every call
            base_url: Gateway base URL
            timeout: Request timeout in seconds (default 30)
            transport: Optional httpx transport, e.g. a MockTransport in tests
            headers: Optional default headers for all requests
        """
        self._config = config
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.default_headers = headers or {}

        self._http = httpx.AsyncClient(
            timeout=timeout,
            transport=transport,
            headers=self.default_headers,
        )

    @property
    def config(self) -> Optional[ZibalConfig]:
        """The explicit configuration, or the current process-wide one."""
        if self._config is not None:
            return self._config
        return get_config()

    async def close(self) -> None:
        """Close the HTTP client and release resources."""
        await self._http.aclose()

    async def __aenter__(self) -> "ZibalClient":
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()

    async def request_payment(
        self,
        amount: int,
        mobile: Optional[str] = None,
        description: Optional[str] = None,
        order_id: Optional[str] = None,
    ) -> Result[RequestResponse]:
        """
        Start a payment.

        Args:
            amount: Amount in Rial
            mobile: Optional payer mobile number
            description: Optional description shown to the payer
            order_id: Optional merchant order identifier

        Returns:
            Success with the RequestResponse (its track_id is used for
            start_url() and verify_payment()), or Failure
        """
        config = self.config
        if config is None or not config.is_valid():
            return self._invalid_config(config)

        def build() -> RequestBody:
            return RequestBody(
                merchant=config.merchant,
                callback_url=config.callback_url,
                amount=amount,
                mobile=mobile,
                description=description,
                order_id=order_id,
            )

        args = {"amount": amount, "mobile": mobile, "description": description, "order_id": order_id}
        return await self._call(config, "request", build, args, RequestResponse)

    async def verify_payment(self, track_id: int) -> Result[VerifyResponse]:
        """
        Verify a payment after the payer returned to the callback URL.

        Args:
            track_id: Track id returned by request_payment()

        Returns:
            Success with the VerifyResponse, or Failure
        """
        config = self.config
        if config is None or not config.is_valid():
            return self._invalid_config(config)

        def build() -> VerifyBody:
            return VerifyBody(merchant=config.merchant, track_id=track_id)

        return await self._call(config, "verify", build, {"track_id": track_id}, VerifyResponse)

    def start_url(self, track_id: int) -> Optional[httpx.URL]:
        """
        URL the payer is sent to in order to pay.

        Args:
            track_id: Track id returned by request_payment()

        Returns:
            `{base_url}/start/{track_id}`, or None if it cannot be built
        """
        return build_url(self.base_url, f"start/{track_id}")

    async def _call(
        self,
        config: ZibalConfig,
        path: str,
        build: Callable[[], BaseModel],
        args: dict[str, Any],
        response_type: type[ResponseT],
    ) -> Result[ResponseT]:
        logger = GatewayLogger(config.log_level)
        try:
            body: BaseModel = build()
        except ValidationError:
            error = BadBodyError(args)
            logger.error("gateway.bad_body", path=path, code=error.code)
            return Failure(error)

        transport = GatewayTransport(self._http, self.base_url, logger)
        result = await transport.exchange(path, body, response_type)
        if result.ok or not result.error.is_endpoint:
            return result

        # Endpoint failures surface as BadResponseError; the specific error
        # stays available as `cause`.
        error = result.error
        if not isinstance(error, BadResponseError):
            error = BadResponseError(result.response, cause=error)
        return Failure(error)

    def _invalid_config(self, config: Optional[ZibalConfig]) -> Failure:
        error = InvalidConfigError()
        level = config.log_level if config is not None else LogLevel.NONE
        GatewayLogger(level).error("gateway.invalid_config", error=error.message)
        return Failure(error)


__all__ = ["ZibalClient", "DEFAULT_BASE_URL"]

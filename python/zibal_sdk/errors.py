"""
Location: python/zibal_sdk/errors.py

Summary:
    Failure kinds reported by the SDK. Each kind has a stable negative
    code and a message built from the context it carries.

    Codes above -200 describe client-side misuse (configuration, URL,
    request body); codes at or below -200 describe the exchange with the
    gateway or its response payload.
"""

from typing import Any, ClassVar, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class ZibalError(Exception):
    """Base exception for all SDK failures."""

    code: ClassVar[int] = 0

    @property
    def message(self) -> str:
        return "Zibal Error"

    @property
    def is_internal(self) -> bool:
        """True for client-side failures strictly between -200 and -100."""
        return -200 < self.code < -100

    @property
    def is_endpoint(self) -> bool:
        """True for failures concerning the network exchange or its payload."""
        return self.code <= -200

    def __str__(self) -> str:
        return self.message


class InvalidConfigError(ZibalError):
    """Raised when the merchant/callback configuration is missing or invalid."""

    code = -100

    @property
    def message(self) -> str:
        return "Invalid Configuration"


class BadURLError(ZibalError):
    """The gateway URL for an endpoint could not be built."""

    code = -101

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(url)

    @property
    def message(self) -> str:
        return f"Bad URL: {self.url}"


class BadBodyError(ZibalError):
    """The outbound request body could not be built or encoded."""

    code = -102

    def __init__(self, body: Any) -> None:
        self.body = body
        super().__init__(body)

    @property
    def message(self) -> str:
        return f"Bad Body: {self.body!r}"


class BadResponseError(ZibalError):
    """
    The gateway could not be reached or answered with an unusable response.

    Attributes:
        response: The httpx response if one was received
        cause: The more specific error this one wraps, if any
    """

    code = -200

    def __init__(
        self,
        response: Optional["httpx.Response"] = None,
        cause: Optional[ZibalError] = None,
    ) -> None:
        self.response = response
        self.cause = cause
        super().__init__(response)

    @property
    def message(self) -> str:
        if self.response is None:
            return "Bad Response: None"
        return f"Bad Response: {self.response.status_code} {self.response.reason_phrase}"


class BadResponseDataError(ZibalError):
    """The response body was not valid JSON of the expected shape."""

    code = -201

    def __init__(self, data: bytes) -> None:
        self.data = data
        super().__init__(data)

    @property
    def message(self) -> str:
        return f"Bad ResponseData: {len(self.data)} bytes"


class InvalidStatusCodeError(ZibalError):
    """A response field holding a status carried an unknown code."""

    code = -202

    def __init__(self, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(status_code)

    @property
    def message(self) -> str:
        return "Invalid Status Code"


ERROR_TYPES: tuple[type[ZibalError], ...] = (
    InvalidConfigError,
    BadURLError,
    BadBodyError,
    BadResponseError,
    BadResponseDataError,
    InvalidStatusCodeError,
)

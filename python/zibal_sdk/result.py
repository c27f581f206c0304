"""
Location: python/zibal_sdk/result.py

Summary:
    Outcome of a single gateway call. A call either succeeds with a parsed
    body or fails with exactly one ZibalError; the two never coexist.

Example:
    result = await client.request_payment(1500)
    if result.ok:
        print(result.body.track_id)
    else:
        print(result.error.code, result.error.message)
"""

from dataclasses import dataclass, field
from typing import Generic, Literal, NoReturn, Optional, TypeVar, Union, TYPE_CHECKING

from .errors import ZibalError

if TYPE_CHECKING:
    import httpx

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """
    Successful call.

    Attributes:
        body: Parsed gateway response
        response: httpx response the body was read from
    """
    body: T
    response: Optional["httpx.Response"] = None

    ok: Literal[True] = field(default=True, init=False)
    error: None = field(default=None, init=False)

    def unwrap(self) -> T:
        return self.body


@dataclass(frozen=True)
class Failure:
    """
    Failed call.

    Attributes:
        error: The single error describing the failure
        response: httpx response, when one was received and kept
    """
    error: ZibalError
    response: Optional["httpx.Response"] = None

    ok: Literal[False] = field(default=False, init=False)
    body: None = field(default=None, init=False)

    def unwrap(self) -> NoReturn:
        raise self.error


Result = Union[Success[T], Failure]

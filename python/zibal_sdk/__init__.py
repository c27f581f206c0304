"""
Location: python/zibal_sdk/__init__.py

Summary:
    Main package initialization for zibal-sdk. Exports all public classes
    and functions for convenient importing.

Usage:
    from zibal_sdk import ZibalClient, ZibalConfig, Status

    # Or use the process-wide configuration
    from zibal_sdk import api
"""

from . import api
from .client import ZibalClient, DEFAULT_BASE_URL
from .config import LogLevel, ZibalConfig, initialize, get_config
from .errors import (
    ZibalError,
    InvalidConfigError,
    BadURLError,
    BadBodyError,
    BadResponseError,
    BadResponseDataError,
    InvalidStatusCodeError,
)
from .result import Result, Success, Failure
from .status import Status, StatusKind, STATUS_CODES
from .types import RequestBody, RequestResponse, VerifyBody, VerifyResponse

__version__ = "0.1.0"

__all__ = [
    # Client
    "ZibalClient",
    "DEFAULT_BASE_URL",
    "api",
    # Configuration
    "LogLevel",
    "ZibalConfig",
    "initialize",
    "get_config",
    # Results
    "Result",
    "Success",
    "Failure",
    # Status codes
    "Status",
    "StatusKind",
    "STATUS_CODES",
    # Wire messages
    "RequestBody",
    "RequestResponse",
    "VerifyBody",
    "VerifyResponse",
    # Exceptions
    "ZibalError",
    "InvalidConfigError",
    "BadURLError",
    "BadBodyError",
    "BadResponseError",
    "BadResponseDataError",
    "InvalidStatusCodeError",
]

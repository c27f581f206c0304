"""
Location: python/zibal_sdk/config.py

Summary:
    Merchant configuration for the SDK. Holds the merchant identifier,
    the callback URL and the log verbosity, and keeps a process-wide
    default set by `initialize()`.

Usage:
    Pass a ZibalConfig to ZibalClient explicitly, or call initialize()
    once at startup and let clients read the process-wide default.
    Unset fields are read from ZIBAL_MERCHANT, ZIBAL_CALLBACK_URL and
    ZIBAL_LOG_LEVEL.

Example:
    from zibal_sdk.config import LogLevel, initialize

    config = initialize("zibal", "https://shop.example.com/callback", LogLevel.ERROR)
"""

from enum import IntEnum
from typing import Any, Optional

from pydantic import AnyHttpUrl, TypeAdapter, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import InvalidConfigError


class LogLevel(IntEnum):
    """Verbosity of SDK logging."""
    NONE = 0
    ERROR = 1
    VERBOSE = 2


_url_adapter = TypeAdapter(AnyHttpUrl)


class ZibalConfig(BaseSettings):
    """
    Merchant configuration.

    Validity is checked by is_valid() on every use rather than stored,
    so a config mutated after creation is re-validated by the client.

    Attributes:
        merchant: Merchant identifier issued by Zibal
        callback_url: Absolute http(s) URL the gateway redirects back to
        log_level: SDK log verbosity
    """

    merchant: str = ""
    callback_url: str = ""
    log_level: LogLevel = LogLevel.ERROR

    model_config = SettingsConfigDict(env_prefix="ZIBAL_")

    @field_validator("log_level", mode="before")
    @classmethod
    def parse_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            if value.isdigit():
                return int(value)
            try:
                return LogLevel[value.upper()]
            except KeyError:
                raise ValueError(f"unknown log level: {value}") from None
        return value

    @classmethod
    def create(
        cls,
        merchant: Optional[str] = None,
        callback_url: Optional[str] = None,
        log_level: Optional[LogLevel] = None,
    ) -> "ZibalConfig":
        """
        Build a configuration and validate it.

        Arguments left as None are read from the environment.

        Raises:
            InvalidConfigError: If the resulting configuration is invalid
        """
        values = {
            "merchant": merchant,
            "callback_url": callback_url,
            "log_level": log_level,
        }
        try:
            config = cls(**{k: v for k, v in values.items() if v is not None})
        except ValidationError as exc:
            raise InvalidConfigError() from exc
        if not config.is_valid():
            raise InvalidConfigError()
        return config

    def is_valid(self) -> bool:
        """Check the current field values."""
        if not self.merchant or not self.callback_url:
            return False
        try:
            _url_adapter.validate_python(self.callback_url)
        except ValidationError:
            return False
        return True


_current: Optional[ZibalConfig] = None


def initialize(
    merchant: Optional[str] = None,
    callback_url: Optional[str] = None,
    log_level: Optional[LogLevel] = None,
) -> ZibalConfig:
    """
    Validate a configuration and make it the process-wide default.

    On failure the previous default is kept.

    Raises:
        InvalidConfigError: If the configuration is invalid
    """
    global _current
    config = ZibalConfig.create(merchant, callback_url, log_level)
    _current = config
    return config


def get_config() -> Optional[ZibalConfig]:
    """Return the process-wide default, or None before initialize()."""
    return _current

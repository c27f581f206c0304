"""
Location: python/zibal_sdk/logging.py

Summary:
    structlog logger used by the SDK, gated by the configured LogLevel.
    The SDK never configures structlog itself; applications route the
    `zibal_sdk` events wherever their own logging setup sends them.

Usage:
    Used by client.py and transport.py. Events carry metadata only
    (path, URL, status code, sizes), never request or response bodies.

Example:
    from zibal_sdk.config import LogLevel
    from zibal_sdk.logging import GatewayLogger

    logger = GatewayLogger(LogLevel.ERROR)
    logger.error("gateway.failed", code=-200)
"""

from typing import Any

import structlog

from .config import LogLevel


class GatewayLogger:
    """
    structlog logger gated by the SDK log level.

    VERBOSE emits info and error events, ERROR emits only errors, NONE
    emits nothing.
    """

    def __init__(self, log_level: LogLevel) -> None:
        self.log_level = log_level
        self._logger = structlog.get_logger("zibal_sdk")

    def info(self, event: str, **kwargs: Any) -> None:
        if self.log_level >= LogLevel.VERBOSE:
            self._logger.info(event, **kwargs)

    def error(self, event: str, **kwargs: Any) -> None:
        if self.log_level >= LogLevel.ERROR:
            self._logger.error(event, **kwargs)

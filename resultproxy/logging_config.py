"""
Centralized logging configuration for the results proxy.

Provides one log line format for the app and the uvicorn server:
Format: 2026-01-06T14:05:52Z [source] LEVEL message

Environment Variables:
    LOG_LEVEL: Set to "DEBUG", "TRACE", or "INFO" (default)
               - INFO: Request and upstream failure logs
               - DEBUG: Every upstream call (method and URL)
               - TRACE: Upstream form parameters as well

Usage:
    from resultproxy.logging_config import configure_logging, get_logger

    configure_logging(source="proxy")
    logger = get_logger(__name__)
    logger.info("Proxy started")
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import UTC, datetime

# Custom TRACE level for very verbose diagnostics
TRACE = 5
logging.addLevelName(TRACE, "TRACE")


class ISO8601Formatter(logging.Formatter):
    """Formatter producing ISO8601 timestamps in UTC.

    Output format: 2026-01-06T14:05:52Z [source] LEVEL message
    """

    def __init__(self, source: str = "proxy"):
        self.source = source
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")
        message = record.getMessage()

        if record.exc_info:
            exception_text = self.formatException(record.exc_info)
            message = f"{message}\n{exception_text}"

        return f"{timestamp} [{self.source}] {record.levelname} {message}"


class HealthCheckFilter(logging.Filter):
    """Suppress health check access logs unless DEBUG is enabled.

    Container probes hit /health every few seconds and would otherwise
    drown out the proxied traffic.
    """

    HEALTH_PATHS = {"/health"}

    def filter(self, record: logging.LogRecord) -> bool:
        if record.levelno == logging.DEBUG:
            return True

        message = record.getMessage()
        return all(not (path in message and ("GET" in message or "200" in message)) for path in self.HEALTH_PATHS)


def resolve_level(debug: bool | None = None) -> int:
    """Map the LOG_LEVEL environment variable to a logging level."""
    log_level_env = os.getenv("LOG_LEVEL", "").upper()
    if log_level_env == "TRACE":
        return TRACE
    if log_level_env == "DEBUG" or debug:
        return logging.DEBUG
    return logging.INFO


def configure_logging(
    source: str = "proxy",
    level: int | None = None,
    debug: bool | None = None,
) -> logging.Logger:
    """Configure logging for the proxy process.

    Args:
        source: Source identifier shown in brackets on every line
        level: Logging level (defaults to INFO, or DEBUG/TRACE from LOG_LEVEL env var)
        debug: Enable debug mode (overrides level to DEBUG)

    Returns:
        Configured root logger
    """
    if level is None:
        level = resolve_level(debug)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear existing handlers to avoid duplicates on reload
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(ISO8601Formatter(source=source))
    handler.addFilter(HealthCheckFilter())

    root_logger.addHandler(handler)

    # Uvicorn installs its own handlers; replace them so the filter applies
    for uvicorn_logger_name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(uvicorn_logger_name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.addHandler(handler)
        uvicorn_logger.setLevel(level)
        uvicorn_logger.propagate = False

    # The portal client logs its own calls; the transport lines are noise
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name."""
    return logging.getLogger(name)

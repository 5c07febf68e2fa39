"""
Uvicorn logging configuration for the results proxy.

Keeps uvicorn's own lines in the unified format
2026-01-06T14:05:52Z [uvicorn] LEVEL message and hides /health probes
from the access log.

Usage:
    uvicorn.run("api.main:app", log_config=UVICORN_LOGGING_CONFIG)
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any


class UvicornAccessFilter(logging.Filter):
    """Filter health check requests from access logs unless DEBUG is enabled."""

    HEALTH_PATHS = {"/health"}

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        for path in self.HEALTH_PATHS:
            if f" {path} " in message or f" {path}?" in message:
                if not logging.getLogger().isEnabledFor(logging.DEBUG):
                    return False
        return True


class UvicornFormatter(logging.Formatter):
    """Output format: 2026-01-06T14:05:52Z [uvicorn] LEVEL message"""

    def __init__(self, source: str = "uvicorn"):
        self.source = source
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")
        return f"{timestamp} [{self.source}] {record.levelname} {record.getMessage()}"


UVICORN_LOGGING_CONFIG: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "filters": {
        "health_filter": {
            "()": UvicornAccessFilter,
        },
    },
    "formatters": {
        "default": {
            "()": UvicornFormatter,
            "source": "uvicorn",
        },
        "access": {
            "()": UvicornFormatter,
            "source": "uvicorn",
        },
    },
    "handlers": {
        "default": {
            "formatter": "default",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stdout",
        },
        "access": {
            "formatter": "access",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stdout",
            "filters": ["health_filter"],
        },
    },
    "loggers": {
        "uvicorn": {
            "handlers": ["default"],
            "level": "INFO",
            "propagate": False,
        },
        "uvicorn.error": {
            "handlers": ["default"],
            "level": "INFO",
            "propagate": False,
        },
        "uvicorn.access": {
            "handlers": ["access"],
            "level": "INFO",
            "propagate": False,
        },
    },
}

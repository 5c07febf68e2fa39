"""Proxy error classes.

Each error carries the HTTP status it maps to; the app's exception
handlers turn them into structured responses.
"""

from __future__ import annotations


class ProxyError(Exception):
    """Base exception for errors surfaced to proxy clients."""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class MissingParameterError(ProxyError):
    """Raised when a required query parameter is absent or empty."""

    status_code = 400

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name} query parameter is required")


class UpstreamError(ProxyError):
    """Raised when the portal or a fetched page could not be retrieved or decoded."""

    status_code = 500


class RenderError(ProxyError):
    """Raised when an upstream payload does not have the shape a renderer needs."""

    status_code = 502

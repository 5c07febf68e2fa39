"""
Shared dependencies for the results proxy API.

The portal client and session table live on ``app.state`` (populated by
``create_app``) so tests can build an app around a mock transport or a
custom table without touching module globals.
"""

from __future__ import annotations

from fastapi import Request

from portal import PortalClient
from resultproxy.sessions import SessionCodeTable

from .settings import Settings


async def get_portal_client(request: Request) -> PortalClient:
    """FastAPI dependency returning the app's portal client."""
    client: PortalClient = request.app.state.portal_client
    return client


async def get_session_table(request: Request) -> SessionCodeTable:
    """FastAPI dependency returning the app's session code table."""
    table: SessionCodeTable = request.app.state.session_table
    return table


async def get_app_settings(request: Request) -> Settings:
    """FastAPI dependency returning the settings the app was built with."""
    settings: Settings = request.app.state.settings
    return settings


__all__ = [
    "get_portal_client",
    "get_session_table",
    "get_app_settings",
]

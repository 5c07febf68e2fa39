#!/usr/bin/env python3
"""
BPUT Results Proxy - HTTP API in front of the BPUT results portal.

This is the main FastAPI application. It exposes stable GET endpoints for
student details, semester results, exam lists, SGPA and the session list,
forwarding each one to the portal as a form-encoded call.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from portal import PortalClient
from resultproxy.errors import ProxyError
from resultproxy.logging_config import configure_logging, get_logger
from resultproxy.sessions import DEFAULT_SESSION_TABLE, SessionCodeTable

from .schemas import ErrorResponse, HealthResponse
from .settings import Settings, get_settings

# Configure unified logging format
# Format: 2026-01-06T14:05:52Z [proxy] LEVEL message
configure_logging(source="proxy")
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifecycle - startup and shutdown."""
    settings: Settings = app.state.settings
    logger.info(f"Proxying results portal at {settings.upstream_base_url}")

    yield

    await app.state.portal_client.aclose()


def create_app(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    session_table: SessionCodeTable | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use instead of the cached environment settings
        transport: httpx transport for upstream calls (tests pass a MockTransport)
        session_table: Session code table to use instead of the built-in one
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="BPUT Results Proxy",
        description="Machine-friendly endpoints for the BPUT results portal",
        lifespan=lifespan,
        # Only the proxied routes are served; everything else is a bare 404
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )

    app.state.settings = settings
    app.state.session_table = session_table or DEFAULT_SESSION_TABLE
    app.state.portal_client = PortalClient(
        settings.upstream_base_url,
        timeout=settings.upstream_timeout,
        transport=transport,
    )

    # Add exception handlers
    @app.exception_handler(ProxyError)
    async def proxy_error_handler(request: Request, exc: ProxyError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.warning(f"{request.url.path} failed with {exc.status_code}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content=ErrorResponse(error=exc.message).model_dump())

    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc: StarletteHTTPException) -> Response:
        return Response(status_code=404)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unhandled error on {request.url.path}")
        return JSONResponse(status_code=500, content=ErrorResponse(error="Internal server error").model_dump())

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )

    # Register routers
    from .routers import results

    app.include_router(results.router)

    @app.get("/health")
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="healthy", service="bput-results-proxy")

    return app


# Create app instance for uvicorn
app = create_app()


def run() -> None:
    """Start uvicorn with the unified logging configuration."""
    import uvicorn

    from resultproxy.uvicorn_logging import UVICORN_LOGGING_CONFIG

    settings = get_settings()
    uvicorn.run(
        "api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=UVICORN_LOGGING_CONFIG,
    )

"""
Pydantic schemas for the results proxy endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body of every JSON error response."""

    error: str = Field(description="Human-readable error message")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str

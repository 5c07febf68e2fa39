"""
Pydantic schemas for the results proxy API.

Re-exports all schemas for convenient importing.
"""

from __future__ import annotations

from resultproxy.models import SessionListing, SubjectResultRow

from .results import ErrorResponse, HealthResponse

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "SessionListing",
    "SubjectResultRow",
]

"""
Request-scoped data models for the results proxy.

Nothing here is persisted; every instance lives for one request.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class UpstreamResult:
    """Outcome of one upstream call: a decoded payload or an error message."""

    payload: Any = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, payload: Any) -> UpstreamResult:
        return cls(payload=payload)

    @classmethod
    def failure(cls, message: str) -> UpstreamResult:
        return cls(error=message)


# Credits and grades arrive as strings or numbers depending on the record
CellValue = str | int | float | None


class SubjectResultRow(BaseModel):
    """One subject row from the portal's subjects-list endpoint."""

    model_config = ConfigDict(extra="ignore")

    subjectCODE: CellValue = Field(default=None, description="Subject code, e.g. CS101")
    subjectName: CellValue = Field(default=None, description="Subject title")
    subjectTP: CellValue = Field(default=None, description="Theory/practical marker")
    subjectCredits: CellValue = Field(default=None, description="Credit weight")
    grade: CellValue = Field(default=None, description="Final grade")


class SessionListing(BaseModel):
    """A session offered on the portal's landing page."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(description="Display name as shown by the portal")
    short_code: str = Field(alias="shortCode", description="Short code, or the name when unmapped")

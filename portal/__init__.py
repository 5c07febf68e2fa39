"""Client for the BPUT results portal."""

from .client import (
    DETAILS_PATH,
    EXAM_LIST_PATH,
    SGPA_PATH,
    SUBJECTS_PATH,
    PortalClient,
)

__all__ = [
    "DETAILS_PATH",
    "EXAM_LIST_PATH",
    "SGPA_PATH",
    "SUBJECTS_PATH",
    "PortalClient",
]

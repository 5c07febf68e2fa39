"""
Session scraping from the portal's landing page.

The landing page carries the session dropdown as a plain ``<select>``.
Label extraction is behind the OptionExtractor protocol so the regex scan
can be replaced by a real parser without touching callers.
"""

from __future__ import annotations

import re
from typing import Protocol

from .models import SessionListing
from .sessions import DEFAULT_SESSION_TABLE, SessionCodeTable

PLACEHOLDER_LABEL = "Select Session"


class OptionExtractor(Protocol):
    """Extracts ``<option>`` labels from HTML markup in document order."""

    def extract(self, markup: str) -> list[str]: ...


class RegexOptionExtractor:
    """Scans markup for ``<option ...>label</option>`` fragments."""

    OPTION_PATTERN = re.compile(r"<option[^>]*>([^<]*)</option>", re.IGNORECASE)

    def extract(self, markup: str) -> list[str]:
        return [match.group(1).strip() for match in self.OPTION_PATTERN.finditer(markup)]


def scrape_sessions(
    markup: str,
    table: SessionCodeTable = DEFAULT_SESSION_TABLE,
    extractor: OptionExtractor | None = None,
) -> list[SessionListing]:
    """Build session listings from the landing page markup.

    The "Select Session" placeholder is dropped; every other label is kept,
    and labels missing from the table keep their name as the short code.
    """
    extractor = extractor or RegexOptionExtractor()
    return [
        SessionListing(name=label, short_code=table.to_short_code(label))
        for label in extractor.extract(markup)
        if label != PLACEHOLDER_LABEL
    ]

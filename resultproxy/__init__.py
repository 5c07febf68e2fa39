"""
Resultproxy - Core logic of the BPUT results proxy.

This package contains:
- sessions: Short code <-> portal display name table
- models: Request-scoped models (UpstreamResult, SubjectResultRow, SessionListing)
- rendering: HTML results table
- scraping: Session dropdown scraping
- errors: Error taxonomy mapped to HTTP statuses
- logging_config: Unified log format
"""

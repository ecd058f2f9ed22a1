"""Exception hierarchy for the claims dashboard."""

from __future__ import annotations


class ClaimboardError(Exception):
    """Base exception for claimboard errors."""


class SourceUnavailableError(ClaimboardError):
    """Raised when a data source cannot be read as a workbook."""

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source


class SessionClosedError(ClaimboardError):
    """Raised when a session is used after teardown."""

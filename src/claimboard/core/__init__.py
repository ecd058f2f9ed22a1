"""Core module - Domain models and shared types."""

from __future__ import annotations

from claimboard.core.exceptions import ClaimboardError, SessionClosedError, SourceUnavailableError
from claimboard.core.models import (
    ChartGroupings,
    Claim,
    FilterSpec,
    Finding,
    GroupCount,
    KPISummary,
    LineItem,
    LineSummary,
    LoadState,
    Page,
    ParsedWorkbook,
    Sheet,
)
from claimboard.core.types import FindingKind, GroupKey, LoadStatus, RiskLevel, SortDirection


__all__ = [
    # Models
    "ChartGroupings",
    "Claim",
    # Errors
    "ClaimboardError",
    "FilterSpec",
    "Finding",
    # Types
    "FindingKind",
    "GroupCount",
    "GroupKey",
    "KPISummary",
    "LineItem",
    "LineSummary",
    "LoadState",
    "LoadStatus",
    "Page",
    "ParsedWorkbook",
    "RiskLevel",
    "SessionClosedError",
    "Sheet",
    "SortDirection",
    "SourceUnavailableError",
]

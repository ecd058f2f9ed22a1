"""claimboard - Claims ingestion and analytics for dashboards.

This package provides:
- Reading claim workbooks (claims sheet plus optional line item sheet)
- Resolving loosely named columns and normalizing dates
- Cross-checking claims against their line items
- Filtering, aggregating, sorting and paging the loaded claims
"""

from __future__ import annotations

from claimboard.config.settings import Settings
from claimboard.core.exceptions import ClaimboardError, SessionClosedError, SourceUnavailableError
from claimboard.core.models import Claim, Finding, FilterSpec, LineItem, LoadState, Page
from claimboard.core.types import FindingKind, LoadStatus, RiskLevel, SortDirection
from claimboard.orchestrator.pipeline import IngestionPipeline
from claimboard.orchestrator.session import DashboardSession, create, load, teardown


__version__ = "0.1.0"

__all__ = [
    "Claim",
    "ClaimboardError",
    "DashboardSession",
    "FilterSpec",
    "Finding",
    "FindingKind",
    "IngestionPipeline",
    "LineItem",
    "LoadState",
    "LoadStatus",
    "Page",
    "RiskLevel",
    "SessionClosedError",
    "Settings",
    "SortDirection",
    "SourceUnavailableError",
    "create",
    "load",
    "teardown",
]

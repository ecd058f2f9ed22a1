"""Ingestion pipeline and dashboard sessions."""

from claimboard.orchestrator.pipeline import IngestionPipeline
from claimboard.orchestrator.session import DashboardSession, create, load, teardown

__all__ = ["DashboardSession", "IngestionPipeline", "create", "load", "teardown"]

"""Ingestion: column resolution, date normalization, mapping and validation."""

from __future__ import annotations

from claimboard.ingest.dates import normalize_date
from claimboard.ingest.mapper import map_claims, map_lines
from claimboard.ingest.resolver import ColumnMap, resolve, resolve_columns, resolve_first
from claimboard.ingest.validator import validate


__all__ = [
    "ColumnMap",
    "map_claims",
    "map_lines",
    "normalize_date",
    "resolve",
    "resolve_columns",
    "resolve_first",
    "validate",
]

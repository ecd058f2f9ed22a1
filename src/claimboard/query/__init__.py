"""Query layer over a loaded claims dataset."""

from __future__ import annotations

from claimboard.query.aggregates import chart_groupings, compute_kpis, group_by, summarize_lines
from claimboard.query.filters import CodeLabels, apply_filter, filter_options
from claimboard.query.paging import paginate, sort_claims


__all__ = [
    "CodeLabels",
    "apply_filter",
    "chart_groupings",
    "compute_kpis",
    "filter_options",
    "group_by",
    "paginate",
    "sort_claims",
    "summarize_lines",
]

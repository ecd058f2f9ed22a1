"""Sorting and pagination of the claims table."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

from claimboard.core.models import Claim, Page
from claimboard.core.types import SortDirection


if TYPE_CHECKING:
    from collections.abc import Sequence

NUMERIC_FIELDS: frozenset[str] = frozenset({"score", "total_charged_amount", "total_allowed_amount", "patient_age"})


def _string_key(value: Any) -> str:
    return str(getattr(value, "value", value) or "").lower()


def sort_claims(
    claims: Sequence[Claim],
    field: str,
    direction: SortDirection | str = SortDirection.DESC,
) -> list[Claim]:
    """Order claims by a field.

    Numeric fields compare numerically, everything else as case-insensitive
    text. The sort is stable in both directions.

    Raises:
        ValueError: If the field is not a claim attribute.
    """
    if field not in Claim.model_fields:
        raise ValueError(f"Unknown sort field: {field}")
    descending = SortDirection(getattr(direction, "value", direction).lower()) == SortDirection.DESC
    if field in NUMERIC_FIELDS:
        return sorted(claims, key=lambda claim: getattr(claim, field), reverse=descending)
    return sorted(claims, key=lambda claim: _string_key(getattr(claim, field)), reverse=descending)


def paginate(claims: Sequence[Claim], page_size: int, page_number: int) -> Page:
    """Slice one page out of a claim sequence.

    Pages are 1-indexed and the requested page is clamped into range; an
    empty sequence still has one (empty) page.

    Raises:
        ValueError: If page_size is less than 1.
    """
    if page_size < 1:
        raise ValueError(f"page_size must be at least 1, got {page_size}")
    total_pages = max(1, math.ceil(len(claims) / page_size))
    page_number = min(max(page_number, 1), total_pages)
    start = (page_number - 1) * page_size
    return Page(
        items=list(claims[start:start + page_size]),
        page_number=page_number,
        total_pages=total_pages,
        total_count=len(claims),
    )

"""Column resolution from free-form sheet headers to canonical concepts."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from claimboard.config.concepts import CLAIM_ID_CONCEPTS
from claimboard.core.utils import cell_text


if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from claimboard.config.concepts import Concept
    from claimboard.core.types import RawRow

logger = logging.getLogger(__name__)

CLAIM_ID_FIELD = "claim_id"


def _collapse(text: str) -> str:
    return " ".join(text.split()).lower()


def _match_exact(keys: Sequence[str], concept: Concept) -> str | None:
    key_set = set(keys)
    for name in concept.names:
        if name in key_set:
            return name
    return None


def _match_collapsed(keys: Sequence[str], concept: Concept) -> str | None:
    collapsed: dict[str, str] = {}
    for key in keys:
        collapsed.setdefault(_collapse(key), key)
    for name in concept.names:
        found = collapsed.get(_collapse(name))
        if found is not None:
            return found
    return None


def _match_keywords(keys: Sequence[str], concept: Concept) -> str | None:
    lowered = [(key, key.lower()) for key in keys]
    for group in concept.keywords:
        for key, lower in lowered:
            if all(token in lower for token in group):
                return key
    return None


def resolve(row_keys: Iterable[str], concept: Concept) -> str | None:
    """Find the header that carries a concept.

    Tries, in order: an exact literal name, a literal name ignoring case and
    repeated whitespace, then the first header containing every token of one
    of the concept's keyword groups.

    Args:
        row_keys: Header names of a sheet or row.
        concept: Concept to look for.

    Returns:
        The matching header, or None when the concept is absent.
    """
    return resolve_first(row_keys, (concept,))


def resolve_first(row_keys: Iterable[str], concepts: Sequence[Concept]) -> str | None:
    """Resolve the first of several alternative concepts.

    Literal matches for every concept take precedence over any keyword match.
    """
    keys = [key for key in row_keys if isinstance(key, str)]
    for stage in (_match_exact, _match_collapsed, _match_keywords):
        for concept in concepts:
            found = stage(keys, concept)
            if found is not None:
                return found
    return None


class ColumnMap:
    """Headers resolved once per sheet, applied uniformly to its rows."""

    def __init__(self, columns: Mapping[str, str | None]) -> None:
        self.columns = dict(columns)

    def column(self, field: str) -> str | None:
        return self.columns.get(field)

    @property
    def missing(self) -> list[str]:
        return [field for field, column in self.columns.items() if column is None]

    def cell(self, row: RawRow, field: str) -> Any:
        """Raw cell value, or None when the field has no column."""
        column = self.columns.get(field)
        if column is None:
            return None
        return row.get(column)

    def text(self, row: RawRow, field: str) -> str | None:
        """Trimmed cell text.

        Returns None when the sheet has no column for the field and '' when
        the column exists but the cell is blank.
        """
        column = self.columns.get(field)
        if column is None:
            return None
        return cell_text(row.get(column))


def resolve_columns(
    headers: Sequence[str],
    concepts: Mapping[str, Concept],
    id_concepts: Sequence[Concept] = CLAIM_ID_CONCEPTS,
) -> ColumnMap:
    """Resolve every concept of a sheet against its headers.

    Args:
        headers: Sheet header names.
        concepts: Field name -> concept table for the sheet.
        id_concepts: Ordered claim identifier candidates.

    Returns:
        ColumnMap covering the claim id and every concept.
    """
    columns: dict[str, str | None] = {CLAIM_ID_FIELD: resolve_first(headers, id_concepts)}
    for field, concept in concepts.items():
        columns[field] = resolve(headers, concept)
    resolved = ColumnMap(columns)
    for field in resolved.missing:
        logger.debug("No column found for %s", field)
    return resolved

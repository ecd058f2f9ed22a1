"""Filtering of the claim set by categorical selections and claim id search."""

from __future__ import annotations

from typing import TYPE_CHECKING

from claimboard.config.settings import DEFAULT_CODE_LABELS


if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from claimboard.core.models import Claim, FilterSpec

# FilterSpec selection -> Claim attribute
FILTER_FIELDS: dict[str, str] = {
    "network_codes": "network_code",
    "form_types": "form_type",
    "risk_levels": "risk_level",
    "audit_flags": "audit_flag",
    "claim_statuses": "claim_status",
    "adjudication_indicators": "adjudication_indicator",
    "claim_types": "claim_type",
}


class CodeLabels:
    """Canonicalizes coded values so equivalent spellings compare equal.

    A field's table maps codes (matched case-insensitively) to labels, so
    "N", "n" and "Manual" can all become "Manual".
    """

    def __init__(self, tables: Mapping[str, Mapping[str, str]] | None = None) -> None:
        if tables is None:
            tables = DEFAULT_CODE_LABELS
        self._tables = {
            field: {code.strip().casefold(): label for code, label in table.items()}
            for field, table in tables.items()
        }

    def canonical(self, field: str, value: object) -> str:
        """Canonical label for a value of a claim field."""
        if value is None:
            return ""
        text = str(getattr(value, "value", value)).strip()
        return self._tables.get(field, {}).get(text.casefold(), text)

    def key(self, field: str, value: object) -> str:
        """Comparison key: the canonical label, case-folded."""
        return self.canonical(field, value).casefold()


def _selected(labels: CodeLabels, attribute: str, value: object, allowed: set[str]) -> bool:
    return value is not None and labels.key(attribute, value) in allowed


def apply_filter(
    claims: Sequence[Claim],
    spec: FilterSpec,
    labels: CodeLabels | None = None,
) -> list[Claim]:
    """Claims matching every active selection of a filter spec.

    A claim passes when, for each field with selected values, its canonical
    value is one of them, and its id contains the search text ignoring case.
    A field the claim has no value for (None) never matches a selection.
    An empty spec returns the claims unchanged and in order.
    """
    if labels is None:
        labels = CodeLabels()
    constraints: list[tuple[str, set[str]]] = []
    for selection, attribute in FILTER_FIELDS.items():
        selected = getattr(spec, selection)
        if selected:
            constraints.append((attribute, {labels.key(attribute, value) for value in selected}))
    search = spec.search_claim_id.strip().casefold()

    matched: list[Claim] = []
    for claim in claims:
        if any(
            not _selected(labels, attribute, getattr(claim, attribute), allowed)
            for attribute, allowed in constraints
        ):
            continue
        if search and search not in claim.claim_id.casefold():
            continue
        matched.append(claim)
    return matched


def filter_options(
    claims: Sequence[Claim],
    labels: CodeLabels | None = None,
) -> dict[str, list[str]]:
    """Sorted distinct canonical values per filterable claim attribute.

    Blank values are left out; spellings that canonicalize to the same label
    appear once.
    """
    if labels is None:
        labels = CodeLabels()
    options: dict[str, list[str]] = {}
    for attribute in FILTER_FIELDS.values():
        distinct: dict[str, str] = {}
        for claim in claims:
            label = labels.canonical(attribute, getattr(claim, attribute))
            if label:
                distinct.setdefault(label.casefold(), label)
        options[attribute] = sorted(distinct.values(), key=str.casefold)
    return options

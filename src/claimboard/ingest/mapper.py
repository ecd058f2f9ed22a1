"""Record mapping from raw sheet rows to claims and line items."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from claimboard.config.concepts import CLAIM_CONCEPTS, LINE_CONCEPTS
from claimboard.core.models import Claim, LineItem
from claimboard.core.types import RiskLevel
from claimboard.core.utils import amount_bucket_for, parse_float, parse_int, risk_level_for
from claimboard.ingest.dates import SERIAL_DATE_MAX, normalize_date
from claimboard.ingest.resolver import CLAIM_ID_FIELD, ColumnMap, resolve_columns


if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from claimboard.core.types import RawRow

logger = logging.getLogger(__name__)

_CLAIM_TEXT_FIELDS = (
    "account_number", "bill_type", "claim_type", "form_type", "submission_method",
    "network_code", "provider_name", "provider_city", "provider_state", "provider_specialty",
    "provider_participation", "patient_gender", "benefit_option", "appeal_id", "appeal_reason",
    "claim_status", "historical_adj_rate",
)
_CLAIM_DATE_FIELDS = (
    "received_at", "claim_begin_date", "claim_end_date", "benefit_plan_updated",
    "provider_contract_updated", "claim_paid_date",
)
_LINE_TEXT_FIELDS = (
    "procedure_code", "diagnosis_code", "revenue_code", "place_of_service", "pre_auth_indicator",
    "room_type", "service_id", "reason_not_covered", "ndc", "drug_units", "drug_uom", "uom",
)
_LINE_AMOUNT_FIELDS = (
    "charged_amount", "paid_amount", "covered_amount", "coinsurance_amount", "deductible_amount",
)
_LINE_DATE_FIELDS = ("line_begin_date", "line_end_date")

_RISK_LEVELS = {level.value.lower(): level for level in RiskLevel}


def sheet_headers(rows: Iterable[RawRow]) -> list[str]:
    """Union of row keys in first-seen order."""
    seen: dict[str, None] = {}
    for row in rows:
        for key in row:
            seen.setdefault(key, None)
    return list(seen)


def explicit_risk_level(value: str | None) -> RiskLevel | None:
    """Risk level named by a source cell, if it names one."""
    if not value:
        return None
    return _RISK_LEVELS.get(value.strip().lower())


def _text(columns: ColumnMap, row: RawRow, field: str) -> str:
    return columns.text(row, field) or ""


def _claim_from_row(columns: ColumnMap, row: RawRow, serial_max: float) -> Claim:
    score = parse_float(columns.cell(row, "score"))
    charged = parse_float(columns.cell(row, "total_charged_amount"))
    values: dict[str, Any] = {
        "claim_id": _text(columns, row, CLAIM_ID_FIELD),
        "score": score,
        "risk_level": explicit_risk_level(columns.text(row, "risk_level")) or risk_level_for(score),
        "total_charged_amount": charged,
        "total_allowed_amount": parse_float(columns.cell(row, "total_allowed_amount")),
        "amount_bucket": amount_bucket_for(charged),
        "adjudication_indicator": _text(columns, row, "adjudication_indicator") or "N",
        "patient_age": parse_int(columns.cell(row, "patient_age")),
        "audit_flag": columns.text(row, "audit_flag"),
    }
    for field in _CLAIM_TEXT_FIELDS:
        values[field] = _text(columns, row, field)
    for field in _CLAIM_DATE_FIELDS:
        values[field] = normalize_date(columns.cell(row, field), serial_max)
    return Claim(**values)


def _line_from_row(columns: ColumnMap, row: RawRow, serial_max: float) -> LineItem:
    values: dict[str, Any] = {
        "claim_id": _text(columns, row, CLAIM_ID_FIELD),
        "claim_line_number": parse_int(columns.cell(row, "claim_line_number")),
        "edi_line_number": parse_int(columns.cell(row, "edi_line_number")),
        "count": parse_int(columns.cell(row, "count")),
    }
    for field in _LINE_AMOUNT_FIELDS:
        values[field] = parse_float(columns.cell(row, field))
    for field in _LINE_TEXT_FIELDS:
        values[field] = _text(columns, row, field)
    for field in _LINE_DATE_FIELDS:
        values[field] = normalize_date(columns.cell(row, field), serial_max)
    return LineItem(**values)


def claim_columns(headers: Sequence[str]) -> ColumnMap:
    return resolve_columns(headers, CLAIM_CONCEPTS)


def line_columns(headers: Sequence[str]) -> ColumnMap:
    return resolve_columns(headers, LINE_CONCEPTS)


def map_claim_rows(rows: Sequence[RawRow], columns: ColumnMap, serial_max: float = SERIAL_DATE_MAX) -> list[Claim]:
    """Map claims sheet rows with already resolved columns."""
    claims = [_claim_from_row(columns, row, serial_max) for row in rows]
    logger.debug("Mapped %d claims", len(claims))
    return claims


def map_line_rows(rows: Sequence[RawRow], columns: ColumnMap, serial_max: float = SERIAL_DATE_MAX) -> list[LineItem]:
    """Map line sheet rows with already resolved columns."""
    lines = [_line_from_row(columns, row, serial_max) for row in rows]
    logger.debug("Mapped %d line items", len(lines))
    return lines


def map_claims(
    rows: Sequence[RawRow],
    headers: Sequence[str] | None = None,
    serial_max: float = SERIAL_DATE_MAX,
) -> list[Claim]:
    """Map claims sheet rows to claims.

    Columns are resolved once from the headers (or the rows' keys) and the
    same resolution is applied to every row. Rows without a claim id are kept
    with an empty id.

    Args:
        rows: Header -> value records of the claims sheet.
        headers: Sheet headers, when known.
        serial_max: Upper bound for numeric strings read as serial dates.

    Returns:
        One claim per row, in row order.
    """
    columns = claim_columns(headers if headers is not None else sheet_headers(rows))
    return map_claim_rows(rows, columns, serial_max)


def map_lines(
    rows: Sequence[RawRow],
    headers: Sequence[str] | None = None,
    serial_max: float = SERIAL_DATE_MAX,
) -> list[LineItem]:
    """Map line sheet rows to line items, in row order."""
    columns = line_columns(headers if headers is not None else sheet_headers(rows))
    return map_line_rows(rows, columns, serial_max)

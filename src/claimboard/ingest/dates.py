"""Date normalization for spreadsheet cells."""

from __future__ import annotations

import math
from datetime import date, datetime, time, timedelta, timezone
from typing import Any

from dateutil import parser as date_parser


# Spreadsheet day zero. Serial 1 would be 1899-12-31 here, reproducing the
# 1900 leap-year defect, so serial 2 is 1900-01-01.
SERIAL_EPOCH = datetime(1899, 12, 30, tzinfo=timezone.utc)
SERIAL_DATE_MAX = 100000.0


def to_iso(moment: datetime | date) -> str:
    """Format a date or datetime as an ISO-8601 UTC timestamp.

    Naive datetimes are taken as UTC.
    """
    if not isinstance(moment, datetime):
        moment = datetime.combine(moment, time())
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    utc = moment.astimezone(timezone.utc).replace(tzinfo=None)
    return utc.isoformat(timespec="milliseconds") + "Z"


def from_serial(serial: float) -> str | None:
    """Convert a spreadsheet serial day count to an ISO timestamp."""
    try:
        return to_iso(SERIAL_EPOCH + timedelta(days=serial))
    except OverflowError:
        return None


def normalize_date(raw: Any, serial_max: float = SERIAL_DATE_MAX) -> str:
    """Normalize a raw date cell to an ISO-8601 timestamp.

    Args:
        raw: A native date, a serial day count, a string, or an empty cell.
        serial_max: Numeric strings below this are read as serial day counts.

    Returns:
        The ISO timestamp, '' for empty input, or the original text when the
        value cannot be read as a date. Never raises.
    """
    if not raw:
        return ""
    if isinstance(raw, (datetime, date)):
        return to_iso(raw)
    if isinstance(raw, bool):
        return str(raw)
    if isinstance(raw, (int, float)):
        if not math.isfinite(raw):
            return ""
        return from_serial(raw) or str(raw)
    if not isinstance(raw, str):
        return str(raw)

    text = raw.strip()
    if not text:
        return ""
    try:
        number = float(text)
    except ValueError:
        number = None
    if number is not None:
        if math.isfinite(number) and 0 < number < serial_max:
            return from_serial(number) or raw
        return raw
    try:
        return to_iso(date_parser.parse(text))
    except (ValueError, OverflowError):
        return raw

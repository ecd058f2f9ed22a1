"""Utility functions for cell parsing and derived claim fields."""

from __future__ import annotations

import math
import re
from datetime import date, datetime
from typing import Any

from claimboard.core.types import RiskLevel


_NUMBER_PREFIX = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_NULL_TOKENS = frozenset({"null", "undefined", "none", "nan"})

HIGH_RISK_THRESHOLD = 0.7
MEDIUM_RISK_THRESHOLD = 0.3

# Coarse bands above the 500-wide ones, highest first
_COARSE_BANDS: tuple[tuple[float, str], ...] = (
    (100000, "100000+"),
    (50000, "50000-100000"),
    (30000, "30000-50000"),
    (20000, "20000-30000"),
    (10000, "10000-20000"),
    (5000, "5000-10000"),
)

AMOUNT_BUCKET_ORDER: tuple[str, ...] = (
    *(f"{start}-{start + 500}" for start in range(0, 5000, 500)),
    "5000-10000",
    "10000-20000",
    "20000-30000",
    "30000-50000",
    "50000-100000",
    "100000+",
)


def cell_text(value: Any) -> str:
    """Render a raw cell as trimmed text, mapping null-ish cells to ''."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if not math.isfinite(value):
            return ""
        if value.is_integer():
            return str(int(value))
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    text = str(value).strip()
    return "" if text.lower() in _NULL_TOKENS else text


def parse_float(value: Any) -> float:
    """Parse a cell as a float, treating anything non-numeric as 0.

    Currency symbols and thousands separators are stripped and a leading
    numeric prefix is accepted, so "$1,200.50" and "12%" both parse.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        result = float(value)
    else:
        text = str(value).replace("$", "").replace(",", "").strip()
        match = _NUMBER_PREFIX.match(text)
        if not match:
            return 0.0
        result = float(match.group(0))
    return result if math.isfinite(result) else 0.0


def parse_int(value: Any) -> int:
    """Parse a cell as an int, truncating toward zero."""
    return int(parse_float(value))


def risk_level_for(score: float) -> RiskLevel:
    """Classify a score: above 0.7 is High, 0.3 to 0.7 Medium, below Low."""
    if score > HIGH_RISK_THRESHOLD:
        return RiskLevel.HIGH
    if score >= MEDIUM_RISK_THRESHOLD:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def amount_bucket_for(amount: float) -> str:
    """Label the monetary band a charged amount falls into."""
    for floor, label in _COARSE_BANDS:
        if amount >= floor:
            return label
    if amount < 0:
        return "0-500"
    start = int(amount // 500) * 500
    return f"{start}-{start + 500}"


def amount_bucket_rank(label: str) -> int:
    """Position of a bucket label in monetary order; unknown labels sort last."""
    try:
        return AMOUNT_BUCKET_ORDER.index(label)
    except ValueError:
        return len(AMOUNT_BUCKET_ORDER)

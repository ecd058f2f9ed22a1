"""Core type definitions and enums."""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeAlias


# A raw spreadsheet row: header -> cell value
RawRow: TypeAlias = dict[str, Any]


class RiskLevel(str, Enum):
    """Risk classification of a claim."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class SortDirection(str, Enum):
    """Ordering direction for the claims table."""

    ASC = "asc"
    DESC = "desc"


class GroupKey(str, Enum):
    """Claim attributes that can be grouped for charts."""

    CITY = "provider_city"
    SPECIALTY = "provider_specialty"
    STATE = "provider_state"
    AMOUNT_BUCKET = "amount_bucket"
    RISK_LEVEL = "risk_level"
    FORM_TYPE = "form_type"
    CLAIM_TYPE = "claim_type"
    CLAIM_STATUS = "claim_status"
    NETWORK_CODE = "network_code"


class FindingKind(str, Enum):
    """Kinds of referential integrity findings."""

    DUPLICATE_LINE_NUMBERS = "duplicate_line_numbers"
    ORPHANED_CLAIMS = "orphaned_claims"
    AMOUNT_MISMATCH = "amount_mismatch"
    ORPHANED_LINES = "orphaned_lines"
    UNLINKABLE_CLAIMS = "unlinkable_claims"


class LoadStatus(str, Enum):
    """Lifecycle states of a dashboard session load."""

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"

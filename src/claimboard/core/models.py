"""Data models for the claims dashboard."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from claimboard.core.types import FindingKind, LoadStatus, RiskLevel  # noqa: TC001 - Pydantic needs at runtime


class Claim(BaseModel):
    """One insurance claim, normalized from a claims sheet row."""

    model_config = ConfigDict(frozen=True)

    claim_id: str = ""
    risk_level: RiskLevel = RiskLevel.LOW
    score: float = 0.0
    total_charged_amount: float = 0.0
    total_allowed_amount: float = 0.0
    amount_bucket: str = "0-500"

    adjudication_indicator: str = "N"
    account_number: str = ""
    bill_type: str = ""
    claim_type: str = ""
    form_type: str = ""
    submission_method: str = ""
    network_code: str = ""

    provider_name: str = ""
    provider_city: str = ""
    provider_state: str = ""
    provider_specialty: str = ""
    provider_participation: str = ""

    patient_age: int = 0
    patient_gender: str = ""
    benefit_option: str = ""

    # None when the sheet has no audit flag column at all
    audit_flag: str | None = None
    appeal_id: str = ""
    appeal_reason: str = ""
    claim_status: str = ""
    historical_adj_rate: str = ""

    received_at: str = ""
    claim_begin_date: str = ""
    claim_end_date: str = ""
    benefit_plan_updated: str = ""
    provider_contract_updated: str = ""
    claim_paid_date: str = ""


class LineItem(BaseModel):
    """One billed service line belonging to a claim."""

    model_config = ConfigDict(frozen=True)

    claim_id: str = ""
    claim_line_number: int = 0
    edi_line_number: int = 0

    charged_amount: float = 0.0
    paid_amount: float = 0.0
    covered_amount: float = 0.0
    coinsurance_amount: float = 0.0
    deductible_amount: float = 0.0

    procedure_code: str = ""
    diagnosis_code: str = ""
    revenue_code: str = ""
    place_of_service: str = ""
    pre_auth_indicator: str = ""
    room_type: str = ""
    service_id: str = ""
    reason_not_covered: str = ""
    ndc: str = ""
    drug_units: str = ""
    drug_uom: str = ""
    count: int = 0
    uom: str = ""

    line_begin_date: str = ""
    line_end_date: str = ""


class FilterSpec(BaseModel):
    """Selected values per categorical field.

    An empty list places no constraint on its field. Values within a field
    are OR-ed, fields are AND-ed.
    """

    network_codes: list[str] = Field(default_factory=list)
    form_types: list[str] = Field(default_factory=list)
    risk_levels: list[str] = Field(default_factory=list)
    audit_flags: list[str] = Field(default_factory=list)
    claim_statuses: list[str] = Field(default_factory=list)
    adjudication_indicators: list[str] = Field(default_factory=list)
    claim_types: list[str] = Field(default_factory=list)
    search_claim_id: str = ""

    @property
    def active_count(self) -> int:
        count = sum(
            len(values)
            for values in (
                self.network_codes, self.form_types, self.risk_levels, self.audit_flags,
                self.claim_statuses, self.adjudication_indicators, self.claim_types,
            )
        )
        return count + (1 if self.search_claim_id.strip() else 0)


class Finding(BaseModel):
    """An advisory result of the referential integrity checks."""

    model_config = ConfigDict(frozen=True)

    kind: FindingKind
    message: str
    claim_id: str | None = None
    claim_ids: list[str] = Field(default_factory=list)
    line_numbers: list[int] = Field(default_factory=list)
    line_total: float | None = None
    claim_total: float | None = None
    delta: float | None = None


class KPISummary(BaseModel):
    """Headline metrics over a set of claims."""
    total_claims: int = 0
    total_amount: float = 0.0
    high_risk: int = 0
    medium_risk: int = 0
    low_risk: int = 0


class GroupCount(BaseModel):
    """A labelled count, one bar or slice of a chart."""
    label: str
    count: int


class ChartGroupings(BaseModel):
    """Chart-ready groupings of the filtered claims."""
    by_city: list[GroupCount] = Field(default_factory=list)
    by_specialty: list[GroupCount] = Field(default_factory=list)
    by_amount_bucket: list[GroupCount] = Field(default_factory=list)
    by_risk: list[GroupCount] = Field(default_factory=list)


class LineSummary(BaseModel):
    """Totals shown on a claim's line item detail view."""
    line_count: int = 0
    total_charged: float = 0.0
    distinct_diagnosis_codes: int = 0
    procedure_code_count: int = 0
    revenue_code_count: int = 0


class Page(BaseModel):
    """One page of the sorted claims table."""
    items: list[Claim] = Field(default_factory=list)
    page_number: int = 1
    total_pages: int = 1
    total_count: int = 0


class LoadState(BaseModel):
    """Load status of a dashboard session."""
    status: LoadStatus = LoadStatus.IDLE
    error: str | None = None
    source: str | None = None

    @property
    def loading(self) -> bool:
        return self.status == LoadStatus.LOADING


class Sheet(BaseModel):
    """Header -> value records read from one worksheet."""
    name: str
    headers: list[str] = Field(default_factory=list)
    rows: list[dict[str, Any]] = Field(default_factory=list)


class ParsedWorkbook(BaseModel):
    """All sheets of a tabular source, in workbook order."""
    source: str
    sheets: list[Sheet] = Field(default_factory=list)

    @property
    def row_count(self) -> int:
        return sum(len(sheet.rows) for sheet in self.sheets)

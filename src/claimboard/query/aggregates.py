"""KPI and chart aggregations over a claim set."""

from __future__ import annotations

from typing import TYPE_CHECKING

from claimboard.core.models import ChartGroupings, GroupCount, KPISummary, LineSummary
from claimboard.core.types import GroupKey, RiskLevel
from claimboard.core.utils import amount_bucket_rank


if TYPE_CHECKING:
    from collections.abc import Sequence

    from claimboard.core.models import Claim, LineItem

UNKNOWN_LABEL = "Unknown"
_BLANK_CODES = frozenset({"", "-", "null"})


def compute_kpis(claims: Sequence[Claim]) -> KPISummary:
    """Count, charged total and risk distribution of a claim set."""
    risk_counts = dict.fromkeys(RiskLevel, 0)
    total_amount = 0.0
    for claim in claims:
        total_amount += claim.total_charged_amount
        risk_counts[claim.risk_level] += 1
    return KPISummary(
        total_claims=len(claims),
        total_amount=total_amount,
        high_risk=risk_counts[RiskLevel.HIGH],
        medium_risk=risk_counts[RiskLevel.MEDIUM],
        low_risk=risk_counts[RiskLevel.LOW],
    )


def _label(claim: Claim, key: GroupKey) -> str:
    value = getattr(claim, key.value)
    text = str(getattr(value, "value", value) or "").strip()
    return text or UNKNOWN_LABEL


def group_by(claims: Sequence[Claim], key: GroupKey, top_n: int | None = None) -> list[GroupCount]:
    """Count claims per label of a grouping key.

    Groups are ordered by descending count, ties keeping first-seen order.
    Amount buckets are ordered by their monetary range instead, unknown
    labels last.

    Args:
        claims: Claims to group.
        key: Attribute to group on.
        top_n: Keep only the first N groups.

    Returns:
        Ordered label/count pairs.
    """
    counts: dict[str, int] = {}
    for claim in claims:
        label = _label(claim, key)
        counts[label] = counts.get(label, 0) + 1
    groups = [GroupCount(label=label, count=count) for label, count in counts.items()]
    if key == GroupKey.AMOUNT_BUCKET:
        groups.sort(key=lambda group: amount_bucket_rank(group.label))
    else:
        groups.sort(key=lambda group: group.count, reverse=True)
    return groups[:top_n] if top_n is not None else groups


def risk_distribution(claims: Sequence[Claim]) -> list[GroupCount]:
    """Claims per risk level in High, Medium, Low order, zeros included."""
    kpis = compute_kpis(claims)
    return [
        GroupCount(label=RiskLevel.HIGH.value, count=kpis.high_risk),
        GroupCount(label=RiskLevel.MEDIUM.value, count=kpis.medium_risk),
        GroupCount(label=RiskLevel.LOW.value, count=kpis.low_risk),
    ]


def chart_groupings(claims: Sequence[Claim], top_cities: int = 8) -> ChartGroupings:
    return ChartGroupings(
        by_city=group_by(claims, GroupKey.CITY, top_n=top_cities),
        by_specialty=group_by(claims, GroupKey.SPECIALTY),
        by_amount_bucket=group_by(claims, GroupKey.AMOUNT_BUCKET),
        by_risk=risk_distribution(claims),
    )


def _has_code(value: str) -> bool:
    return value.strip().lower() not in _BLANK_CODES


def summarize_lines(lines: Sequence[LineItem]) -> LineSummary:
    """Totals for a claim's line item detail view.

    Diagnosis codes are counted distinct; procedure and revenue codes are
    counted per line that carries one.
    """
    return LineSummary(
        line_count=len(lines),
        total_charged=sum(line.charged_amount for line in lines),
        distinct_diagnosis_codes=len({
            line.diagnosis_code.strip() for line in lines if _has_code(line.diagnosis_code)
        }),
        procedure_code_count=sum(1 for line in lines if _has_code(line.procedure_code)),
        revenue_code_count=sum(1 for line in lines if _has_code(line.revenue_code)),
    )

"""Referential integrity checks between claims and line items."""

from __future__ import annotations

from typing import TYPE_CHECKING

from claimboard.core.models import Finding
from claimboard.core.types import FindingKind


if TYPE_CHECKING:
    from collections.abc import Sequence

    from claimboard.core.models import Claim, LineItem

AMOUNT_TOLERANCE = 0.01


def group_lines(lines: Sequence[LineItem]) -> dict[str, list[LineItem]]:
    """Group line items by claim id, preserving first-seen order."""
    grouped: dict[str, list[LineItem]] = {}
    for line in lines:
        grouped.setdefault(line.claim_id, []).append(line)
    return grouped


def _duplicate_line_findings(grouped: dict[str, list[LineItem]]) -> list[Finding]:
    findings: list[Finding] = []
    for claim_id, claim_lines in grouped.items():
        seen: set[int] = set()
        duplicates: list[int] = []
        for line in claim_lines:
            number = line.claim_line_number
            if number in seen and number not in duplicates:
                duplicates.append(number)
            seen.add(number)
        if duplicates:
            findings.append(Finding(
                kind=FindingKind.DUPLICATE_LINE_NUMBERS,
                message=f"Claim {claim_id}: Duplicate line numbers found: {', '.join(map(str, duplicates))}",
                claim_id=claim_id,
                line_numbers=duplicates,
            ))
    return findings


def _orphaned_claim_findings(claims: Sequence[Claim], grouped: dict[str, list[LineItem]]) -> list[Finding]:
    missing = list(dict.fromkeys(
        claim.claim_id for claim in claims if claim.claim_id and claim.claim_id not in grouped
    ))
    if not missing:
        return []
    return [Finding(
        kind=FindingKind.ORPHANED_CLAIMS,
        message=f"Claims missing line data: {', '.join(missing)}",
        claim_ids=missing,
    )]


def _amount_mismatch_findings(
    claims: Sequence[Claim], grouped: dict[str, list[LineItem]], tolerance: float
) -> list[Finding]:
    findings: list[Finding] = []
    for claim in claims:
        if not claim.claim_id:
            continue
        claim_lines = grouped.get(claim.claim_id)
        if not claim_lines:
            continue
        line_total = sum(line.charged_amount for line in claim_lines)
        delta = abs(line_total - claim.total_charged_amount)
        if delta > tolerance:
            findings.append(Finding(
                kind=FindingKind.AMOUNT_MISMATCH,
                message=(
                    f"Claim {claim.claim_id}: Line total ({line_total:.2f}) does not match "
                    f"claim amount ({claim.total_charged_amount:.2f}), difference: {delta:.2f}"
                ),
                claim_id=claim.claim_id,
                line_total=line_total,
                claim_total=claim.total_charged_amount,
                delta=delta,
            ))
    return findings


def _orphaned_line_findings(claims: Sequence[Claim], grouped: dict[str, list[LineItem]]) -> list[Finding]:
    claim_ids = {claim.claim_id for claim in claims if claim.claim_id}
    unmatched = [claim_id for claim_id in grouped if claim_id not in claim_ids]
    if not unmatched:
        return []
    labels = [claim_id or "(blank)" for claim_id in unmatched]
    return [Finding(
        kind=FindingKind.ORPHANED_LINES,
        message=f"Line items reference unknown claims: {', '.join(labels)}",
        claim_ids=unmatched,
    )]


def _unlinkable_claim_findings(claims: Sequence[Claim]) -> list[Finding]:
    blank = sum(1 for claim in claims if not claim.claim_id)
    if not blank:
        return []
    return [Finding(
        kind=FindingKind.UNLINKABLE_CLAIMS,
        message=f"{blank} claim(s) have no claim id and cannot be linked to line items",
    )]


def validate(
    claims: Sequence[Claim],
    lines: Sequence[LineItem],
    tolerance: float = AMOUNT_TOLERANCE,
) -> list[Finding]:
    """Cross-check claims against their line items.

    Findings are advisory: nothing is dropped or changed, and the inputs are
    not mutated.

    Args:
        claims: Mapped claims.
        lines: Mapped line items.
        tolerance: Largest accepted gap between a claim's charged total and
            the sum of its line charges.

    Returns:
        Duplicate line number, orphaned claim, amount mismatch, orphaned line
        and unlinkable claim findings, in that order.
    """
    grouped = group_lines(lines)
    return [
        *_duplicate_line_findings(grouped),
        *_orphaned_claim_findings(claims, grouped),
        *_amount_mismatch_findings(claims, grouped, tolerance),
        *_orphaned_line_findings(claims, grouped),
        *_unlinkable_claim_findings(claims),
    ]

"""Tests for referential integrity checks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from claimboard.core.types import FindingKind
from claimboard.ingest.validator import validate


if TYPE_CHECKING:
    from collections.abc import Callable


def _kinds(findings: list) -> list[FindingKind]:
    return [finding.kind for finding in findings]


class TestValidate:
    def test_claim_without_lines_is_orphaned(self, make_claims: Callable) -> None:
        findings = validate(make_claims({"claim_id": "A", "total_charged_amount": 100}), [])

        assert _kinds(findings) == [FindingKind.ORPHANED_CLAIMS]
        assert findings[0].claim_ids == ["A"]
        assert "A" in findings[0].message

    def test_consistent_data_has_no_findings(self, make_claims: Callable, make_lines: Callable) -> None:
        claims = make_claims({"claim_id": "C1", "total_charged_amount": 1200})
        lines = make_lines(
            {"claim_id": "C1", "claim_line_number": 1, "charged_amount": 700},
            {"claim_id": "C1", "claim_line_number": 2, "charged_amount": 500},
        )
        assert validate(claims, lines) == []

    def test_duplicate_line_numbers(self, make_claims: Callable, make_lines: Callable) -> None:
        claims = make_claims({"claim_id": "C1"})
        lines = make_lines(*(
            {"claim_id": "C1", "claim_line_number": number} for number in (2, 1, 2, 1, 2)
        ))
        findings = [f for f in validate(claims, lines) if f.kind == FindingKind.DUPLICATE_LINE_NUMBERS]

        assert len(findings) == 1
        assert findings[0].claim_id == "C1"
        assert findings[0].line_numbers == [2, 1]

    def test_amount_mismatch_beyond_tolerance(self, make_claims: Callable, make_lines: Callable) -> None:
        claims = make_claims({"claim_id": "C1", "total_charged_amount": 100})
        lines = make_lines(
            {"claim_id": "C1", "claim_line_number": 1, "charged_amount": 60},
            {"claim_id": "C1", "claim_line_number": 2, "charged_amount": 30},
        )
        findings = validate(claims, lines)

        assert _kinds(findings) == [FindingKind.AMOUNT_MISMATCH]
        assert findings[0].line_total == 90
        assert findings[0].claim_total == 100
        assert findings[0].delta == 10

    def test_amount_within_tolerance(self, make_claims: Callable, make_lines: Callable) -> None:
        claims = make_claims({"claim_id": "C1", "total_charged_amount": 100})
        lines = make_lines({"claim_id": "C1", "claim_line_number": 1, "charged_amount": 100.005})
        assert validate(claims, lines) == []

    def test_custom_tolerance(self, make_claims: Callable, make_lines: Callable) -> None:
        claims = make_claims({"claim_id": "C1", "total_charged_amount": 100})
        lines = make_lines({"claim_id": "C1", "claim_line_number": 1, "charged_amount": 104})
        assert validate(claims, lines, tolerance=5) == []

    def test_lines_for_unknown_claims(self, make_claims: Callable, make_lines: Callable) -> None:
        claims = make_claims({"claim_id": "C1"})
        lines = make_lines({"claim_id": "C1", "claim_line_number": 1}, {"claim_id": "Z", "claim_line_number": 1})
        findings = validate(claims, lines)

        assert _kinds(findings) == [FindingKind.ORPHANED_LINES]
        assert findings[0].claim_ids == ["Z"]

    def test_claims_without_id_are_unlinkable_not_orphaned(self, make_claims: Callable, make_lines: Callable) -> None:
        claims = make_claims({"claim_id": "C1"}, {"claim_id": ""})
        lines = make_lines({"claim_id": "C1", "claim_line_number": 1})
        findings = validate(claims, lines)

        assert _kinds(findings) == [FindingKind.UNLINKABLE_CLAIMS]

    def test_finding_order(self, make_claims: Callable, make_lines: Callable) -> None:
        claims = make_claims(
            {"claim_id": "C1", "total_charged_amount": 10},
            {"claim_id": "C2"},
            {"claim_id": ""},
        )
        lines = make_lines(
            {"claim_id": "C1", "claim_line_number": 1, "charged_amount": 50},
            {"claim_id": "C1", "claim_line_number": 1, "charged_amount": 50},
            {"claim_id": "X", "claim_line_number": 1},
        )
        assert _kinds(validate(claims, lines)) == [
            FindingKind.DUPLICATE_LINE_NUMBERS,
            FindingKind.ORPHANED_CLAIMS,
            FindingKind.AMOUNT_MISMATCH,
            FindingKind.ORPHANED_LINES,
            FindingKind.UNLINKABLE_CLAIMS,
        ]

    def test_inputs_untouched(self, make_claims: Callable, make_lines: Callable) -> None:
        claims = make_claims({"claim_id": "C1", "total_charged_amount": 5})
        lines = make_lines({"claim_id": "C1", "claim_line_number": 1, "charged_amount": 9})
        before = ([c.model_dump() for c in claims], [line.model_dump() for line in lines])

        validate(claims, lines)

        assert ([c.model_dump() for c in claims], [line.model_dump() for line in lines]) == before


class TestBlankClaimIds:
    def test_blank_id_claims_not_matched_to_blank_id_lines(self, make_claims: Callable, make_lines: Callable) -> None:
        claims = make_claims(
            {"claim_id": "", "total_charged_amount": 100},
            {"claim_id": "", "total_charged_amount": 100},
        )
        lines = make_lines({"claim_id": "", "claim_line_number": 1, "charged_amount": 40})
        findings = validate(claims, lines)

        assert _kinds(findings) == [FindingKind.ORPHANED_LINES, FindingKind.UNLINKABLE_CLAIMS]
        assert findings[0].claim_ids == [""]
        assert "(blank)" in findings[0].message
        assert "2 claim(s)" in findings[1].message

    def test_blank_id_lines_orphaned_next_to_linked_claims(self, make_claims: Callable, make_lines: Callable) -> None:
        claims = make_claims({"claim_id": "C1"}, {"claim_id": ""})
        lines = make_lines({"claim_id": "C1", "claim_line_number": 1}, {"claim_id": "", "claim_line_number": 1})
        orphaned = [f for f in validate(claims, lines) if f.kind == FindingKind.ORPHANED_LINES]

        assert len(orphaned) == 1
        assert orphaned[0].claim_ids == [""]

"""In-memory claims dataset with the claim id -> line items index."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from claimboard.ingest.validator import group_lines


if TYPE_CHECKING:
    from collections.abc import Sequence

    from claimboard.core.models import Claim, Finding, LineItem


class ClaimsDataset:
    """One loaded snapshot of claims and line items.

    Built once per load and only read afterwards; a reload builds a new
    dataset instead of changing this one.
    """

    def __init__(
        self,
        claims: Sequence[Claim] = (),
        lines: Sequence[LineItem] = (),
        findings: Sequence[Finding] = (),
        source: str | None = None,
        missing_columns: dict[str, list[str]] | None = None,
    ) -> None:
        self.claims: tuple[Claim, ...] = tuple(claims)
        self.lines: tuple[LineItem, ...] = tuple(lines)
        self.findings: tuple[Finding, ...] = tuple(findings)
        self.source = source
        self.missing_columns = dict(missing_columns or {})
        self._lines_by_claim: dict[str, tuple[LineItem, ...]] = {
            claim_id: tuple(claim_lines) for claim_id, claim_lines in group_lines(self.lines).items()
        }
        self._folded_ids: dict[str, str] = {}
        for claim_id in self._lines_by_claim:
            self._folded_ids.setdefault(claim_id.strip().casefold(), claim_id)

    @classmethod
    def empty(cls) -> ClaimsDataset:
        return cls()

    def line_items_for(self, claim_id: str) -> list[LineItem]:
        """Line items of a claim: exact id match, else a case-insensitive one."""
        if not claim_id.strip():
            return []
        exact = self._lines_by_claim.get(claim_id)
        if exact is not None:
            return list(exact)
        folded = self._folded_ids.get(claim_id.strip().casefold())
        if folded is None:
            return []
        return list(self._lines_by_claim[folded])

    def find_claim(self, claim_id: str) -> Claim | None:
        if not claim_id.strip():
            return None
        for claim in self.claims:
            if claim.claim_id == claim_id:
                return claim
        folded = claim_id.strip().casefold()
        for claim in self.claims:
            if claim.claim_id.casefold() == folded:
                return claim
        return None

    def get_stats(self) -> dict[str, Any]:
        """Dataset statistics."""
        return {
            "claims": len(self.claims),
            "claim_lines": len(self.lines),
            "claims_with_lines": sum(
                1 for claim in self.claims if claim.claim_id and claim.claim_id in self._lines_by_claim
            ),
            "findings": len(self.findings),
        }

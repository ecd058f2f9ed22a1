"""Tests for the ingestion pipeline."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from claimboard.core.exceptions import SourceUnavailableError
from claimboard.core.types import FindingKind, RiskLevel
from claimboard.orchestrator.pipeline import IngestionPipeline


if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from claimboard.config.settings import Settings


class TestIngestionPipeline:
    def test_two_sheet_build(self, sample_workbook: Path, settings: Settings) -> None:
        dataset = IngestionPipeline(settings).build(sample_workbook)

        assert len(dataset.claims) == 1
        assert dataset.claims[0].risk_level == RiskLevel.HIGH
        assert dataset.claims[0].amount_bucket == "1000-1500"
        assert dataset.findings == ()
        assert len(dataset.line_items_for("C1")) == 1
        assert dataset.get_stats() == {"claims": 1, "claim_lines": 1, "claims_with_lines": 1, "findings": 0}

    def test_missing_columns_recorded_per_sheet(self, sample_workbook: Path, settings: Settings) -> None:
        dataset = IngestionPipeline(settings).build(sample_workbook)

        assert "audit_flag" in dataset.missing_columns["Claims"]
        assert "procedure_code" in dataset.missing_columns["Lines"]
        assert "claim_id" not in dataset.missing_columns["Claims"]

    def test_claims_only_workbook(
        self,
        write_workbook: Callable[..., Path],
        settings: Settings,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        path = write_workbook({"Claims": (["clmId", "score"], [["A", "0.1"], ["B", "0.4"]])})

        with caplog.at_level(logging.WARNING):
            dataset = IngestionPipeline(settings).build(path)

        assert dataset.lines == ()
        assert [finding.kind for finding in dataset.findings] == [FindingKind.ORPHANED_CLAIMS]
        assert "Claims missing line data: A, B" in caplog.text

    def test_tolerance_from_settings(self, write_workbook: Callable[..., Path], settings: Settings) -> None:
        path = write_workbook({
            "Claims": (["clmId", "clmAmt_totChrgAmt"], [["A", "100"]]),
            "Lines": (["clmId", "clmLnNum", "chrgAmt"], [["A", "1", "103"]]),
        })
        settings.ingest.amount_tolerance = 5

        assert IngestionPipeline(settings).build(path).findings == ()

    def test_unreadable_source_raises(self, tmp_path: Path, settings: Settings) -> None:
        with pytest.raises(SourceUnavailableError):
            IngestionPipeline(settings).build(tmp_path / "missing.xlsx")

    @pytest.mark.asyncio
    async def test_run_off_the_event_loop(self, sample_workbook: Path, settings: Settings) -> None:
        dataset = await IngestionPipeline(settings).run(sample_workbook)
        assert dataset.claims[0].claim_id == "C1"

"""Ingestion pipeline: workbook -> mapped records -> validated dataset."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import TYPE_CHECKING

from claimboard.config.settings import Settings
from claimboard.ingest.mapper import claim_columns, line_columns, map_claim_rows, map_line_rows
from claimboard.ingest.validator import validate
from claimboard.storage.dataset import ClaimsDataset
from claimboard.tools.workbook import read_workbook


if TYPE_CHECKING:
    from pathlib import Path

    from claimboard.core.models import Claim, LineItem, ParsedWorkbook

logger = logging.getLogger(__name__)

CLAIMS_SHEET = 0
LINES_SHEET = 1


class IngestionPipeline:
    """Orchestrates reading, mapping and validating a claims workbook."""

    def __init__(self, settings: Settings | None = None) -> None:
        if settings is None:
            settings = Settings()
        self.settings = settings

    async def run(self, source: str | Path | bytes) -> ClaimsDataset:
        """Run the complete pipeline without blocking the event loop."""
        return await asyncio.to_thread(self.build, source)

    def build(self, source: str | Path | bytes) -> ClaimsDataset:
        """Run the complete pipeline on a workbook source.

        Args:
            source: Workbook path or bytes.

        Returns:
            A fully mapped and validated dataset.

        Raises:
            SourceUnavailableError: If the source cannot be read.
        """
        start_time = time.time()
        label = "<bytes>" if isinstance(source, (bytes, bytearray)) else str(source)
        logger.info("Starting ingestion for: %s", label)

        # Stage 1: Read workbook
        logger.info("Stage 1/3: Reading workbook")
        workbook = read_workbook(source)

        # Stage 2: Map claims and lines
        logger.info("Stage 2/3: Mapping records")
        claims, lines, missing_columns = self._map(workbook)
        logger.info("Loaded %d claims and %d line items", len(claims), len(lines))

        # Stage 3: Validate references
        logger.info("Stage 3/3: Validating line data")
        findings = validate(claims, lines, self.settings.ingest.amount_tolerance)
        if findings:
            logger.warning("Line data validation issues found: %d", len(findings))
            for finding in findings:
                logger.warning("  - %s", finding.message)
        else:
            logger.info("Line data validation passed: no issues found")

        dataset = ClaimsDataset(
            claims=claims,
            lines=lines,
            findings=findings,
            source=workbook.source,
            missing_columns=missing_columns,
        )
        stats = dataset.get_stats()
        logger.info(
            "Ingestion complete in %.1fs: %d claims, %d with line data",
            time.time() - start_time, stats["claims"], stats["claims_with_lines"],
        )
        return dataset

    def _map(self, workbook: ParsedWorkbook) -> tuple[list[Claim], list[LineItem], dict[str, list[str]]]:
        serial_max = self.settings.ingest.serial_date_max
        claim_sheet = workbook.sheets[CLAIMS_SHEET]
        columns = claim_columns(claim_sheet.headers)
        missing: dict[str, list[str]] = {claim_sheet.name: columns.missing}
        claims = map_claim_rows(claim_sheet.rows, columns, serial_max)

        if len(workbook.sheets) <= LINES_SHEET:
            logger.info("No line item sheet in %s", workbook.source)
            return claims, [], missing
        line_sheet = workbook.sheets[LINES_SHEET]
        columns = line_columns(line_sheet.headers)
        missing[line_sheet.name] = columns.missing
        lines = map_line_rows(line_sheet.rows, columns, serial_max)
        return claims, lines, missing

"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest
from openpyxl import Workbook

from claimboard.config.settings import Settings
from claimboard.core.models import Claim, LineItem


if TYPE_CHECKING:
    from collections.abc import Callable, Sequence


CLAIM_HEADERS = ["clmId", "score", "clmAmt_totChrgAmt"]
LINE_HEADERS = ["clmId", "clmLnNum", "chrgAmt"]


@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Default settings, unaffected by the caller's environment."""
    for name in (
        "CLAIMBOARD_AMOUNT_TOLERANCE",
        "CLAIMBOARD_SERIAL_DATE_MAX",
        "CLAIMBOARD_PAGE_SIZE",
        "CLAIMBOARD_TOP_CITIES",
        "CLAIMBOARD_SORT_FIELD",
        "CLAIMBOARD_SORT_DIRECTION",
        "CLAIMBOARD_LOG_LEVEL",
        "CODE_LABELS",
    ):
        monkeypatch.delenv(name, raising=False)
    return Settings()


@pytest.fixture
def write_workbook(tmp_path: Path) -> Callable[..., Path]:
    """Write sheets of (headers, rows) to an xlsx file under tmp_path."""

    def _write(
        sheets: dict[str, tuple[Sequence[str], Sequence[Sequence[Any]]]],
        name: str = "claims.xlsx",
    ) -> Path:
        workbook = Workbook()
        workbook.remove(workbook.active)
        for title, (headers, rows) in sheets.items():
            worksheet = workbook.create_sheet(title)
            worksheet.append(list(headers))
            for row in rows:
                worksheet.append(list(row))
        path = tmp_path / name
        workbook.save(path)
        return path

    return _write


@pytest.fixture
def sample_workbook(write_workbook: Callable[..., Path]) -> Path:
    """Two-sheet workbook with one claim and its single line."""
    return write_workbook({
        "Claims": (CLAIM_HEADERS, [["C1", "0.85", "1200"]]),
        "Lines": (LINE_HEADERS, [["C1", "1", "1200"]]),
    })


@pytest.fixture
def make_claims() -> Callable[..., list[Claim]]:
    """Build claims from keyword overrides, one dict per claim."""

    def _make(*overrides: dict[str, Any]) -> list[Claim]:
        return [Claim(**values) for values in overrides]

    return _make


@pytest.fixture
def make_lines() -> Callable[..., list[LineItem]]:
    """Build line items from keyword overrides, one dict per line."""

    def _make(*overrides: dict[str, Any]) -> list[LineItem]:
        return [LineItem(**values) for values in overrides]

    return _make

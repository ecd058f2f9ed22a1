"""Tests for rich console output."""

from __future__ import annotations

import logging

import pytest
from rich.console import Console
from rich.logging import RichHandler

from claimboard.console.logger import DashboardConsole
from claimboard.core.models import ChartGroupings, Finding, GroupCount, KPISummary
from claimboard.core.types import FindingKind


@pytest.fixture
def recorder() -> Console:
    return Console(record=True, width=120)


@pytest.fixture
def dashboard_console(recorder: Console) -> DashboardConsole:
    return DashboardConsole(verbose=True, console=recorder)


def test_load_summary(dashboard_console: DashboardConsole, recorder: Console) -> None:
    stats = {"claims": 3, "claim_lines": 7, "claims_with_lines": 2, "findings": 1}
    kpis = KPISummary(total_claims=3, total_amount=1234.5, high_risk=1, medium_risk=1, low_risk=1)
    dashboard_console.print_load_summary(stats, kpis)

    output = recorder.export_text()
    assert "Load Summary" in output
    assert "$1,234.50" in output


def test_findings_grouped_by_kind(dashboard_console: DashboardConsole, recorder: Console) -> None:
    findings = [
        Finding(kind=FindingKind.ORPHANED_CLAIMS, message="Claims missing line data: A", claim_ids=["A"]),
        *(
            Finding(kind=FindingKind.AMOUNT_MISMATCH, message=f"Claim M{index}: mismatch", claim_id=f"M{index}")
            for index in range(7)
        ),
    ]
    dashboard_console.print_findings(findings)

    output = recorder.export_text()
    assert "Orphaned Claims (1)" in output
    assert "Amount Mismatch (7)" in output
    assert "and 2 more" in output


def test_no_findings(dashboard_console: DashboardConsole, recorder: Console) -> None:
    dashboard_console.print_findings([])
    assert "no issues found" in recorder.export_text()


def test_groupings(dashboard_console: DashboardConsole, recorder: Console) -> None:
    groupings = ChartGroupings(by_risk=[GroupCount(label="High", count=4)])
    dashboard_console.print_groupings(groupings)

    output = recorder.export_text()
    assert "Risk Distribution" in output
    assert "High" in output


def test_error_panel(dashboard_console: DashboardConsole, recorder: Console) -> None:
    dashboard_console.print_error("Source file not found: x.xlsx")
    assert "Source file not found" in recorder.export_text()


def test_setup_logging_installs_rich_handler(dashboard_console: DashboardConsole) -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        dashboard_console.setup_logging("DEBUG")
        assert any(isinstance(handler, RichHandler) for handler in root.handlers)
        assert root.level == logging.DEBUG
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)

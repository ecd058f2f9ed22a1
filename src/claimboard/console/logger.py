"""Rich console logging and diagnostics for dashboard sessions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.text import Text

from claimboard.console.display import (
    print_error,
    print_findings,
    print_groupings,
    print_load_summary,
)


if TYPE_CHECKING:
    from claimboard.core.models import ChartGroupings, Finding, KPISummary


class DashboardConsole:
    """Rich console interface for load progress and diagnostics."""

    def __init__(self, verbose: bool = False, console: Console | None = None) -> None:
        self.console = console or Console()
        self.verbose = verbose

    def setup_logging(self, level: str = "INFO") -> None:
        logging.basicConfig(
            level=level if self.verbose else "WARNING",
            format="%(message)s",
            handlers=[
                RichHandler(
                    console=self.console, rich_tracebacks=True, show_time=False, show_path=False
                )
            ],
            force=True,
        )

    def print_header(self, source: str) -> None:
        header = Text()
        header.append("claimboard", style="bold blue")
        header.append(" - Claims Analytics\n\n", style="dim")
        header.append("Source: ", style="bold")
        header.append(source, style="green")
        self.console.print(Panel(header, border_style="blue"))

    def print_load_summary(self, stats: dict[str, Any], kpis: KPISummary) -> None:
        print_load_summary(self.console, stats, kpis)

    def print_findings(self, findings: list[Finding]) -> None:
        print_findings(self.console, findings)

    def print_groupings(self, groupings: ChartGroupings) -> None:
        print_groupings(self.console, groupings)

    def print_error(self, error: str) -> None:
        print_error(self.console, error)

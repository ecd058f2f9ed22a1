"""Display components for console output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree


if TYPE_CHECKING:
    from rich.console import Console

    from claimboard.core.models import ChartGroupings, Finding, GroupCount, KPISummary


def print_load_summary(console: Console, stats: dict[str, Any], kpis: KPISummary) -> None:
    """Print dataset and KPI summary."""
    console.print()
    table = Table(title="Load Summary", border_style="blue")
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")
    table.add_row("Claims", str(stats["claims"]))
    table.add_row("Line Items", str(stats["claim_lines"]))
    table.add_row("Claims With Lines", str(stats["claims_with_lines"]))
    table.add_row("Total Charged", f"${kpis.total_amount:,.2f}")
    table.add_row("  [red]High Risk[/red]", str(kpis.high_risk))
    table.add_row("  [yellow]Medium Risk[/yellow]", str(kpis.medium_risk))
    table.add_row("  [green]Low Risk[/green]", str(kpis.low_risk))
    table.add_row("Findings", str(stats["findings"]))
    console.print(table)


def print_findings(console: Console, findings: list[Finding]) -> None:
    """Print validation findings grouped by kind."""
    if not findings:
        console.print("  [green]✓[/green] Line data validation passed: no issues found")
        return
    by_kind: dict[str, list[Finding]] = {}
    for finding in findings:
        by_kind.setdefault(finding.kind.value, []).append(finding)
    tree = Tree("[bold yellow]Line Data Validation Issues[/bold yellow]")
    for kind, kind_findings in by_kind.items():
        branch = tree.add(f"[cyan]{kind.replace('_', ' ').title()}[/cyan] ({len(kind_findings)})")
        for finding in kind_findings[:5]:
            branch.add(f"[dim]{finding.message}[/dim]")
        if len(kind_findings) > 5:
            branch.add(f"[dim]... and {len(kind_findings) - 5} more[/dim]")
    console.print(tree)


def _groups_table(title: str, groups: list[GroupCount]) -> Table:
    table = Table(title=title, border_style="dim")
    table.add_column("Label")
    table.add_column("Claims", justify="right")
    for group in groups:
        table.add_row(group.label, str(group.count))
    return table


def print_groupings(console: Console, groupings: ChartGroupings) -> None:
    """Print chart groupings as tables."""
    console.print(_groups_table("Claims by Billing Provider City", groupings.by_city))
    console.print(_groups_table("Claims by Provider Specialty", groupings.by_specialty))
    console.print(_groups_table("Claims by Amount Range", groupings.by_amount_bucket))
    console.print(_groups_table("Risk Distribution", groupings.by_risk))


def print_error(console: Console, error: str) -> None:
    console.print()
    console.print(Panel(f"[red]{error}[/red]", title="[red]Error[/red]", border_style="red"))

"""Rich output formatting helpers for the compatprobe CLI.

Verdict Color Mapping:
    compatible = green, expected-absence = yellow, fatal-incompatibility = bold red
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from compatprobe.core.classification import Verdict
from compatprobe.core.environment import EnvironmentContext
from compatprobe.core.probes import Probe
from compatprobe.core.report import OverallStatus, Report, explanation_of, summary_line

_VERDICT_STYLES: dict[Verdict, str] = {
    Verdict.COMPATIBLE: "green",
    Verdict.EXPECTED_ABSENCE: "yellow",
    Verdict.FATAL_INCOMPATIBILITY: "bold red",
}

_STATUS_STYLES: dict[OverallStatus, str] = {
    OverallStatus.ALL_COMPATIBLE: "bold green",
    OverallStatus.DEGRADED_EXPECTED: "bold yellow",
    OverallStatus.INCOMPATIBLE: "bold red",
}

console = Console()


def verdict_style(verdict: Verdict) -> str:
    """Return the Rich style string for a given verdict."""
    return _VERDICT_STYLES.get(verdict, "white")


def print_context(context: EnvironmentContext) -> None:
    """Print the detected environment context as a panel."""
    header = Text.assemble(
        ("Vendor: ", "bold"), (context.vendor_id, ""),
        ("  Version: ", "bold"), (str(context.version), ""),
    )
    console.print(Panel(header, title="Environment"))
    if context.raw_vendor or context.raw_version:
        console.print(
            f"  [dim]reported as: {context.raw_vendor or '-'} {context.raw_version or '-'}[/dim]"
        )


def print_report(report: Report) -> None:
    """Print the per-probe verdict table followed by the overall status.

    Args:
        report: The aggregated run report.
    """
    if report.context is not None:
        print_context(report.context)

    if not report.results:
        console.print("[dim]No probes were run.[/dim]")
        return

    table = Table(title="Compatibility Probes", show_header=True, header_style="bold")
    table.add_column("Probe", style="bold", no_wrap=True)
    table.add_column("Verdict", justify="center", no_wrap=True)
    table.add_column("Category", style="dim")
    table.add_column("Explanation")

    for result in report.results:
        category = result.outcome.category.value if result.outcome.category else "-"
        table.add_row(
            result.probe_name,
            Text(result.verdict.value, style=verdict_style(result.verdict)),
            category,
            explanation_of(result),
        )

    console.print(table)
    status_style = _STATUS_STYLES.get(report.status, "white")
    console.print(Text(summary_line(report), style=status_style))


def print_probe_list(probes: list[Probe]) -> None:
    """Print registered probes with their declared classification rules."""
    if not probes:
        console.print("[dim]No probes registered.[/dim]")
        return

    table = Table(title="Registered Probes", show_header=True, header_style="bold")
    table.add_column("Probe", style="bold", no_wrap=True)
    table.add_column("Expected-failure vendors")
    table.add_column("Removed in", justify="right")
    table.add_column("Description", style="dim")
    for probe in probes:
        vendors = ", ".join(sorted(probe.expected_failure_vendors)) or "-"
        removal = str(probe.min_version_for_removal) if probe.min_version_for_removal is not None else "-"
        table.add_row(probe.name, vendors, removal, probe.description)
    console.print(table)


def probe_to_json(probe: Probe) -> dict[str, Any]:
    return {
        "name": probe.name,
        "description": probe.description,
        "expected_failure_vendors": sorted(probe.expected_failure_vendors),
        "min_version_for_removal": (
            str(probe.min_version_for_removal) if probe.min_version_for_removal is not None else None
        ),
    }

"""Fold probe results into a Report and render it.

Two renderings are provided:

- ``render_human`` -- one line per probe (name, verdict, explanation) and a
  closing summary line, for consoles and logs.
- ``render_machine`` -- a JSON-serializable dict with the overall status and
  an ordered list of ``{name, verdict, category}`` entries, for CI gating.

Rendering never raises. Results without an explanation get a placeholder.
"""

from __future__ import annotations

from typing import Any, Iterable

from compatprobe.core.classification import Verdict
from compatprobe.core.environment import EnvironmentContext
from compatprobe.core.report.models import Report
from compatprobe.core.runner import ProbeResult

MISSING_EXPLANATION = "no explanation recorded"


def aggregate(
    results: Iterable[ProbeResult],
    context: EnvironmentContext | None = None,
) -> Report:
    """Build the run's Report from the runner's results."""
    return Report(results=tuple(results), context=context)


def explanation_of(result: ProbeResult) -> str:
    text = (result.explanation or "").strip()
    return text or MISSING_EXPLANATION


def summary_line(report: Report) -> str:
    counts = report.counts()
    parts = [
        f"{len(report.results)} probes",
        f"{counts[Verdict.COMPATIBLE]} compatible",
        f"{counts[Verdict.EXPECTED_ABSENCE]} expected absence",
        f"{counts[Verdict.FATAL_INCOMPATIBILITY]} fatal",
    ]
    return f"{' | '.join(parts)} => {report.status.value}"


def render_human(report: Report) -> list[str]:
    """Render a Report as plain text lines.

    Returns:
        One line per probe followed by a summary line.
    """
    width = max((len(r.probe_name) for r in report.results), default=0)
    lines = [
        f"{r.probe_name:<{width}}  {r.verdict.value:<21}  {explanation_of(r)}"
        for r in report.results
    ]
    lines.append(summary_line(report))
    return lines


def render_machine(report: Report) -> dict[str, Any]:
    """Render a Report as a JSON-serializable structure."""
    return {
        "status": report.status.value,
        "exit_code": report.exit_code,
        "context": report.context.as_dict() if report.context else None,
        "probes": [
            {
                "name": r.probe_name,
                "verdict": r.verdict.value,
                "category": r.outcome.category.value if r.outcome.category else None,
            }
            for r in report.results
        ],
    }

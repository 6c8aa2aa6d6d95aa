"""Report aggregation and rendering.

Submodules
----------
- ``models``: OverallStatus, Report.
- ``aggregator``: aggregate(), render_human(), render_machine().
"""

from compatprobe.core.report.aggregator import (
    MISSING_EXPLANATION,
    aggregate,
    explanation_of,
    render_human,
    render_machine,
    summary_line,
)
from compatprobe.core.report.models import OverallStatus, Report

__all__ = [
    "MISSING_EXPLANATION",
    "OverallStatus",
    "Report",
    "aggregate",
    "explanation_of",
    "render_human",
    "render_machine",
    "summary_line",
]

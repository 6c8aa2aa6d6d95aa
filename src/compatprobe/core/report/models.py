"""Report data model: OverallStatus and Report."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from compatprobe.core.classification import Verdict
from compatprobe.core.environment import EnvironmentContext
from compatprobe.core.runner import ProbeResult


class OverallStatus(str, Enum):
    """Run-level status derived from the per-probe verdicts."""

    ALL_COMPATIBLE = "all-compatible"
    DEGRADED_EXPECTED = "degraded-expected"
    INCOMPATIBLE = "incompatible"


@dataclass(frozen=True)
class Report:
    """Ordered probe results plus the status computed from them.

    ``status`` is a property rather than a field, so it can only ever be the
    function of ``results`` defined here.

    Attributes:
        results: Probe results in registration order.
        context: Environment the probes ran against, if known.
    """

    results: tuple[ProbeResult, ...]
    context: EnvironmentContext | None = None

    @property
    def status(self) -> OverallStatus:
        verdicts = {r.verdict for r in self.results}
        if Verdict.FATAL_INCOMPATIBILITY in verdicts:
            return OverallStatus.INCOMPATIBLE
        if Verdict.EXPECTED_ABSENCE in verdicts:
            return OverallStatus.DEGRADED_EXPECTED
        return OverallStatus.ALL_COMPATIBLE

    @property
    def exit_code(self) -> int:
        """Process exit status: 1 if incompatible, else 0."""
        return 1 if self.status is OverallStatus.INCOMPATIBLE else 0

    def counts(self) -> dict[Verdict, int]:
        """Number of results per verdict (every verdict present as a key)."""
        tally = {verdict: 0 for verdict in Verdict}
        for result in self.results:
            tally[result.verdict] += 1
        return tally

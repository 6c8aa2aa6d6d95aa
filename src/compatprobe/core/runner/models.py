"""ProbeResult: the immutable per-probe record produced by the runner."""

from __future__ import annotations

from dataclasses import dataclass

from compatprobe.core.classification import Verdict
from compatprobe.core.probes import Outcome


@dataclass(frozen=True)
class ProbeResult:
    """Outcome and verdict of one probe execution.

    Attributes:
        probe_name: Name of the probe that ran.
        outcome: What the action did.
        verdict: Classification of the outcome.
        explanation: One-line human-readable explanation.
    """

    probe_name: str
    outcome: Outcome
    verdict: Verdict
    explanation: str = ""

"""Classification policy: (Outcome, EnvironmentContext, Probe) -> Verdict.

This is the single place where vendor and version knowledge turns a probe
failure into either an expected absence or a fatal incompatibility. The
policy reads nothing but the probe's declared rule fields:

1. A successful outcome is always ``COMPATIBLE``.
2. A failure is ``EXPECTED_ABSENCE`` when the context's vendor is listed in
   ``expected_failure_vendors``, or when ``min_version_for_removal`` is set
   and the (known) runtime version is at or above it.
3. Every other failure is ``FATAL_INCOMPATIBILITY``.

Both functions here are pure and total.
"""

from __future__ import annotations

from compatprobe.core.classification.models import Verdict
from compatprobe.core.environment import EnvironmentContext
from compatprobe.core.probes import Outcome, Probe


def _vendor_rule_matches(context: EnvironmentContext, probe: Probe) -> bool:
    return context.vendor_id in probe.expected_failure_vendors


def _version_rule_matches(context: EnvironmentContext, probe: Probe) -> bool:
    threshold = probe.min_version_for_removal
    if threshold is None or not context.version.known:
        return False
    return context.version >= threshold


def classify(outcome: Outcome, context: EnvironmentContext, probe: Probe) -> Verdict:
    """Classify one probe outcome against the environment context.

    Args:
        outcome: What happened when the probe's action ran.
        context: The run's environment context.
        probe: The probe whose declared rules apply.

    Returns:
        Exactly one ``Verdict``.
    """
    if outcome.is_success:
        return Verdict.COMPATIBLE
    if _vendor_rule_matches(context, probe) or _version_rule_matches(context, probe):
        return Verdict.EXPECTED_ABSENCE
    return Verdict.FATAL_INCOMPATIBILITY


def explain(
    outcome: Outcome,
    verdict: Verdict,
    context: EnvironmentContext,
    probe: Probe,
) -> str:
    """Render a one-line explanation for a classified outcome."""
    if verdict is Verdict.COMPATIBLE:
        return "capability present"

    category = outcome.category.value if outcome.category else "Unknown"
    detail = f"{category}: {outcome.message}" if outcome.message else category
    runtime = f"{context.vendor_id} {context.version}"

    if verdict is Verdict.EXPECTED_ABSENCE:
        reasons: list[str] = []
        if _vendor_rule_matches(context, probe):
            reasons.append(f"vendor {context.vendor_id} is expected to lack it")
        if _version_rule_matches(context, probe):
            reasons.append(f"removed as of {probe.min_version_for_removal}")
        return f"{detail} (expected on {runtime}: {'; '.join(reasons)})"

    return f"{detail} (unexpected on {runtime})"

"""Probe abstraction and registry.

Submodules
----------
- ``models``: FailureCategory, OutcomeStatus, Outcome, Probe, make_probe.
- ``registry``: ProbeRegistry.
"""

from compatprobe.core.probes.models import (
    FailureCategory,
    Outcome,
    OutcomeStatus,
    Probe,
    ProbeAction,
    make_probe,
)
from compatprobe.core.probes.registry import ProbeRegistry

__all__ = [
    "FailureCategory",
    "Outcome",
    "OutcomeStatus",
    "Probe",
    "ProbeAction",
    "ProbeRegistry",
    "make_probe",
]

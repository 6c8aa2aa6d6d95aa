"""Probe execution.

Submodules
----------
- ``models``: ProbeResult.
- ``scope``: per-probe resource scope (probe_scope()).
- ``engine``: ProbeRunner and exception-to-outcome conversion.
"""

from compatprobe.core.runner.engine import ProbeRunner, categorize, outcome_from_exception
from compatprobe.core.runner.models import ProbeResult
from compatprobe.core.runner.scope import probe_scope

__all__ = [
    "ProbeResult",
    "ProbeRunner",
    "categorize",
    "outcome_from_exception",
    "probe_scope",
]

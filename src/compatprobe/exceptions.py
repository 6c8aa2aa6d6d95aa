"""compatprobe exception hierarchy.

All public exceptions inherit from CompatProbeError. The hierarchy splits
into two branches that the rest of the package treats very differently:

- ``ProbeFailure`` is raised *inside* probe actions. The runner always
  contains it and turns it into a failure outcome; it never escapes a run.
- ``HarnessError`` signals broken wiring (duplicate probe names, unknown
  probe selections, malformed manifests). It propagates and stops the run
  before any probe executes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from compatprobe.core.probes.models import FailureCategory


class CompatProbeError(Exception):
    """Base exception for all compatprobe errors."""


class ProbeFailure(CompatProbeError):
    """Structured failure raised by a probe action.

    Actions raise this (usually ``raise ProbeFailure(...) from exc``) to
    report which kind of capability is missing. The underlying cause chain
    is preserved through the normal ``__cause__`` mechanism.

    Attributes:
        category: The ``FailureCategory`` describing the failure.
        message: Human-readable description.
    """

    def __init__(self, category: FailureCategory, message: str) -> None:
        super().__init__(message)
        self.category = category
        self.message = message


class HarnessError(CompatProbeError):
    """Raised when the probe harness itself is misconfigured.

    Harness errors indicate a programming or configuration mistake, not an
    environment incompatibility, and are allowed to terminate the run.
    """


class DuplicateProbeError(HarnessError):
    """Raised when two probes are registered under the same name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Probe already registered: {name!r}")
        self.name = name


class UnknownProbeError(HarnessError):
    """Raised when a probe selection names probes that were never registered."""

    def __init__(self, names: list[str]) -> None:
        joined = ", ".join(repr(n) for n in names)
        super().__init__(f"Unknown probe(s): {joined}")
        self.names = names


class ManifestError(HarnessError):
    """Raised when a probe manifest cannot be loaded.

    Covers unreadable files, invalid YAML, and entries with missing or
    unsupported fields.
    """

"""Data models for probes: FailureCategory, Outcome, Probe.

These types are shared by the registry, runner, classification policy and
report renderers. They carry no execution logic.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable

from compatprobe.core.environment import (
    UNKNOWN_VENDOR,
    RuntimeVersion,
    VersionLike,
    normalize_vendor,
)

ProbeAction = Callable[[], object]


# ---------------------------------------------------------------------------
# FailureCategory / OutcomeStatus
# ---------------------------------------------------------------------------


class FailureCategory(str, Enum):
    """Kind of capability a failing probe found missing."""

    CLASS_NOT_AVAILABLE = "ClassNotAvailable"
    METHOD_NOT_AVAILABLE = "MethodNotAvailable"
    PERMISSION_DENIED = "PermissionDenied"
    RUNTIME_FAILURE = "RuntimeFailure"
    UNKNOWN = "Unknown"


class OutcomeStatus(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"


# ---------------------------------------------------------------------------
# Outcome: what happened when a probe action ran
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Outcome:
    """Result of executing a single probe action.

    Attributes:
        status: SUCCESS or FAILURE.
        category: Failure category, None on success.
        message: Failure message, empty on success.
        causes: Rendered underlying cause chain, outermost first.
    """

    status: OutcomeStatus
    category: FailureCategory | None = None
    message: str = ""
    causes: tuple[str, ...] = ()

    @classmethod
    def success(cls) -> Outcome:
        return cls(OutcomeStatus.SUCCESS)

    @classmethod
    def failure(
        cls,
        category: FailureCategory,
        message: str,
        causes: Iterable[str] = (),
    ) -> Outcome:
        return cls(OutcomeStatus.FAILURE, category, message, tuple(causes))

    @property
    def is_success(self) -> bool:
        return self.status is OutcomeStatus.SUCCESS


# ---------------------------------------------------------------------------
# Probe: a named capability check with declared classification rules
# ---------------------------------------------------------------------------


def _vendor_id(raw: str) -> str:
    """Normalize a declared vendor the same way the context vendor is."""
    text = str(raw).strip().lower()
    vendor = normalize_vendor(text)
    if vendor == UNKNOWN_VENDOR and text != UNKNOWN_VENDOR:
        raise ValueError(f"Unrecognized vendor in expected_failure_vendors: {raw!r}")
    return vendor


@dataclass(frozen=True)
class Probe:
    """A single named capability check.

    The classification rules are declared on the probe itself and are the
    only per-probe input the classification policy consults.

    Attributes:
        name: Unique, stable identifier within a registry.
        action: Zero-argument callable. Returning normally means the
            capability is present; raising means it is not.
        expected_failure_vendors: Normalized vendor ids for which a failure
            is an expected absence rather than an incompatibility.
        min_version_for_removal: Runtime version from which the feature is
            known to be gone. Failures at or above it are expected.
        description: One-line human description.
    """

    name: str
    action: ProbeAction = field(compare=False)
    expected_failure_vendors: frozenset[str] = frozenset()
    min_version_for_removal: RuntimeVersion | None = None
    description: str = ""

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Probe name must be a non-empty string")
        if not callable(self.action):
            raise TypeError(f"Probe {self.name!r} action is not callable")
        vendors = frozenset(_vendor_id(v) for v in self.expected_failure_vendors)
        object.__setattr__(self, "expected_failure_vendors", vendors)
        if self.min_version_for_removal is not None:
            threshold = RuntimeVersion.parse(self.min_version_for_removal)
            if not threshold.known:
                raise ValueError(
                    f"Probe {self.name!r} has an unparsable removal version: "
                    f"{self.min_version_for_removal!r}"
                )
            object.__setattr__(self, "min_version_for_removal", threshold)


def make_probe(
    name: str,
    action: ProbeAction,
    *,
    expected_failure_vendors: Iterable[str] = (),
    min_version_for_removal: VersionLike | None = None,
    description: str = "",
) -> Probe:
    """Convenience constructor accepting loose rule types.

    Args:
        name: Probe name.
        action: Zero-argument probe action.
        expected_failure_vendors: Any iterable of vendor ids.
        min_version_for_removal: Version string, major number or
            RuntimeVersion; None for no threshold.
        description: One-line description.

    Returns:
        A frozen ``Probe``.
    """
    return Probe(
        name=name,
        action=action,
        expected_failure_vendors=frozenset(expected_failure_vendors),
        min_version_for_removal=min_version_for_removal,  # type: ignore[arg-type]
        description=description,
    )

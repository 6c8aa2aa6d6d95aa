"""Tests for Probe and Outcome data models."""

from __future__ import annotations

import pytest

from compatprobe.core.environment import RuntimeVersion
from compatprobe.core.probes import (
    FailureCategory,
    Outcome,
    OutcomeStatus,
    Probe,
    make_probe,
)


def _noop() -> None:
    pass


class TestOutcome:
    def test_success(self) -> None:
        outcome = Outcome.success()
        assert outcome.is_success
        assert outcome.status is OutcomeStatus.SUCCESS
        assert outcome.category is None
        assert outcome.message == ""

    def test_failure_keeps_category_and_causes(self) -> None:
        outcome = Outcome.failure(
            FailureCategory.PERMISSION_DENIED, "denied", ["OSError: nope"]
        )
        assert not outcome.is_success
        assert outcome.category is FailureCategory.PERMISSION_DENIED
        assert outcome.causes == ("OSError: nope",)

    def test_category_values(self) -> None:
        assert {c.value for c in FailureCategory} == {
            "ClassNotAvailable",
            "MethodNotAvailable",
            "PermissionDenied",
            "RuntimeFailure",
            "Unknown",
        }


class TestProbe:
    def test_make_probe_coerces_rules(self) -> None:
        probe = make_probe(
            "kcms", _noop,
            expected_failure_vendors=["Oracle "],
            min_version_for_removal="9",
        )
        assert probe.expected_failure_vendors == frozenset({"oracle"})
        assert probe.min_version_for_removal == RuntimeVersion(9, 0, 0)

    def test_integer_threshold_on_dataclass(self) -> None:
        probe = Probe("x", _noop, min_version_for_removal=11)  # type: ignore[arg-type]
        assert probe.min_version_for_removal == RuntimeVersion(11)

    @pytest.mark.parametrize("threshold", ["garbage", -1, True, RuntimeVersion.unknown()])
    def test_unparsable_threshold_rejected(self, threshold: object) -> None:
        with pytest.raises(ValueError, match="unparsable removal version"):
            make_probe("x", _noop, min_version_for_removal=threshold)  # type: ignore[arg-type]

    def test_display_vendor_names_normalized(self) -> None:
        probe = make_probe(
            "x", _noop,
            expected_failure_vendors=["Eclipse Temurin", "Eclipse Adoptium", "OpenJDK"],
        )
        assert probe.expected_failure_vendors == frozenset({"eclipse-temurin", "openjdk"})

    def test_unknown_vendor_id_accepted(self) -> None:
        probe = make_probe("x", _noop, expected_failure_vendors=["unknown"])
        assert probe.expected_failure_vendors == frozenset({"unknown"})

    def test_unrecognized_vendor_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unrecognized vendor"):
            make_probe("x", _noop, expected_failure_vendors=["Azul Systems"])

    def test_defaults(self) -> None:
        probe = make_probe("x", _noop)
        assert probe.expected_failure_vendors == frozenset()
        assert probe.min_version_for_removal is None

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValueError):
            make_probe("  ", _noop)

    def test_non_callable_action_rejected(self) -> None:
        with pytest.raises(TypeError):
            make_probe("x", "not callable")  # type: ignore[arg-type]

    def test_probe_is_frozen(self) -> None:
        probe = make_probe("x", _noop)
        with pytest.raises(AttributeError):
            probe.name = "y"  # type: ignore[misc]

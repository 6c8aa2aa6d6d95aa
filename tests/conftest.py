"""Shared fixtures for compatprobe tests."""

from __future__ import annotations

from typing import Callable

import pytest

from compatprobe.core.environment import EnvironmentContext, build_context
from compatprobe.core.probes import FailureCategory, ProbeRegistry, make_probe
from compatprobe.exceptions import ProbeFailure


def succeed() -> None:
    """Probe action that always completes normally."""


def fail_with(category: FailureCategory, message: str = "missing") -> Callable[[], None]:
    """Build a probe action that raises a structured ProbeFailure."""

    def action() -> None:
        raise ProbeFailure(category, message)

    return action


@pytest.fixture
def oracle_11() -> EnvironmentContext:
    return build_context("Oracle Corporation", "11.0.2")


@pytest.fixture
def temurin_8() -> EnvironmentContext:
    return build_context("Eclipse Adoptium", "1.8.0_392")


@pytest.fixture
def mixed_registry() -> ProbeRegistry:
    """Registry with one passing, one expected-failing and one fatal probe."""
    registry = ProbeRegistry()
    registry.register(make_probe("present", succeed))
    registry.register(make_probe(
        "removed",
        fail_with(FailureCategory.CLASS_NOT_AVAILABLE, "gone"),
        min_version_for_removal=9,
    ))
    registry.register(make_probe(
        "required",
        fail_with(FailureCategory.METHOD_NOT_AVAILABLE, "needed"),
    ))
    return registry

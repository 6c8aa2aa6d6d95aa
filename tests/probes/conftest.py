"""Fixtures for probe tests: fake JDK tools and intercepted subprocess calls."""

from __future__ import annotations

import subprocess

import pytest

from tests.probes.helpers import FakeJdk


def _fake_tool(tool: str, java_home: str | None = None) -> str:
    return f"/jdk/bin/{tool}"


@pytest.fixture
def fake_jdk(monkeypatch: pytest.MonkeyPatch) -> FakeJdk:
    """Pretend every JDK tool exists under /jdk/bin and intercept subprocess.run."""
    jdk = FakeJdk()
    monkeypatch.setattr("compatprobe.probes.actions.find_java_tool", _fake_tool)
    monkeypatch.setattr("compatprobe.introspection.runtime.find_java_tool", _fake_tool)
    monkeypatch.setattr(subprocess, "run", jdk.run)
    return jdk


@pytest.fixture
def no_jdk(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        "compatprobe.probes.actions.find_java_tool", lambda tool, java_home=None: None
    )

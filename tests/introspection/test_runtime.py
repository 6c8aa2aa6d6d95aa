"""Tests for host runtime introspection."""

from __future__ import annotations

import platform
import subprocess

import pytest

from compatprobe.introspection import (
    detect_java_identity,
    detect_python_identity,
    find_java_tool,
    parse_properties_listing,
)

from tests.probes.helpers import FakeJdk

LISTING = """\
Property settings:
    file.encoding = UTF-8
    java.library.path = /usr/java/packages/lib
        /usr/lib64
        /lib64
    java.vendor = Eclipse Adoptium
    java.version = 17.0.9
    java.vm.name = OpenJDK 64-Bit Server VM

openjdk version "17.0.9" 2023-10-17
"""


def test_parse_properties_listing() -> None:
    props = parse_properties_listing(LISTING)
    assert props["java.vendor"] == "Eclipse Adoptium"
    assert props["java.version"] == "17.0.9"
    assert props["java.library.path"] == "/usr/java/packages/lib"
    assert "/usr/lib64" not in props


def test_detect_java_identity(monkeypatch: pytest.MonkeyPatch) -> None:
    jdk = FakeJdk(stderr=LISTING)
    monkeypatch.setattr(
        "compatprobe.introspection.runtime.find_java_tool",
        lambda tool, java_home=None: "/jdk/bin/java",
    )
    monkeypatch.setattr(subprocess, "run", jdk.run)
    identity = detect_java_identity("/jdk")
    assert identity.vendor == "Eclipse Adoptium"
    assert identity.version == "17.0.9"
    assert identity.source == "java"
    assert jdk.calls == [["/jdk/bin/java", "-XshowSettings:properties", "-version"]]


def test_detect_java_identity_without_java(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        "compatprobe.introspection.runtime.find_java_tool", lambda tool, java_home=None: None
    )
    identity = detect_java_identity()
    assert identity.vendor == ""
    assert identity.version == ""


def test_detect_java_identity_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    jdk = FakeJdk(raise_exc=subprocess.TimeoutExpired(["java"], 1))
    monkeypatch.setattr(
        "compatprobe.introspection.runtime.find_java_tool",
        lambda tool, java_home=None: "/jdk/bin/java",
    )
    monkeypatch.setattr(subprocess, "run", jdk.run)
    assert detect_java_identity(timeout=1).version == ""


def test_detect_python_identity() -> None:
    identity = detect_python_identity()
    assert identity.vendor == platform.python_implementation()
    assert identity.version == platform.python_version()


def test_find_java_tool_in_java_home(tmp_path) -> None:
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    tool = bin_dir / "javap"
    tool.write_text("#!/bin/sh\nexit 0\n")
    tool.chmod(0o755)
    assert find_java_tool("javap", tmp_path) == str(tool)
    assert find_java_tool("java", tmp_path) is None

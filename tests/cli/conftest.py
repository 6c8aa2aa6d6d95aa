"""Shared fixtures for CLI tests.

Provides temporary probe manifests whose probes pass, fail with an expected
absence, or fail fatally, independent of any installed JDK.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def passing_manifest(tmp_path: Path) -> Path:
    path = tmp_path / "passing.yaml"
    path.write_text(
        "probes:\n"
        "  - name: json-module\n"
        "    kind: module\n"
        "    target: json\n"
        "  - name: json-decoder\n"
        "    kind: attribute\n"
        "    target: json:JSONDecoder\n"
    )
    return path


@pytest.fixture
def expected_manifest(tmp_path: Path) -> Path:
    """One passing probe and one failing probe excused for Oracle."""
    path = tmp_path / "expected.yaml"
    path.write_text(
        "probes:\n"
        "  - name: json-module\n"
        "    kind: module\n"
        "    target: json\n"
        "  - name: legacy-engine\n"
        "    kind: module\n"
        "    target: compatprobe_removed_engine_xyz\n"
        "    expected_failure_vendors: [oracle]\n"
    )
    return path


@pytest.fixture
def fatal_manifest(tmp_path: Path) -> Path:
    """One passing probe and one probe failing with no excuse."""
    path = tmp_path / "fatal.yaml"
    path.write_text(
        "probes:\n"
        "  - name: a\n"
        "    kind: module\n"
        "    target: json\n"
        "  - name: b\n"
        "    kind: module\n"
        "    target: compatprobe_required_engine_xyz\n"
    )
    return path


@pytest.fixture
def duplicate_manifest(tmp_path: Path) -> Path:
    path = tmp_path / "dup.yaml"
    path.write_text(
        "probes:\n"
        "  - {name: x, kind: module, target: json}\n"
        "  - {name: x, kind: module, target: os}\n"
    )
    return path

"""Factories for common probe actions.

Each factory returns a zero-argument callable suitable as ``Probe.action``.
Actions report a missing capability by raising ``ProbeFailure`` with the
category that best describes what was missing, chaining the low-level
error as ``__cause__``:

- ``module_probe``: ClassNotAvailable
- ``attribute_probe``: ClassNotAvailable, MethodNotAvailable
- ``command_probe``: ClassNotAvailable, PermissionDenied, RuntimeFailure
- ``java_class_probe``: ClassNotAvailable, RuntimeFailure
- ``java_option_probe``: MethodNotAvailable, ClassNotAvailable, RuntimeFailure
- ``java_property_probe``: RuntimeFailure, ClassNotAvailable
- ``env_probe``: RuntimeFailure
"""

from __future__ import annotations

import importlib
import os
import subprocess
from typing import Callable, Sequence

from compatprobe.core.probes import FailureCategory
from compatprobe.exceptions import ProbeFailure
from compatprobe.introspection import find_java_tool, read_java_properties

DEFAULT_TIMEOUT: float = 30.0

_UNRECOGNIZED_OPTION_MARKERS = ("Unrecognized VM option", "Unrecognized option")
_CLASS_NOT_FOUND_MARKERS = ("class not found", "ClassNotFoundException")


def _run(argv: Sequence[str], timeout: float) -> subprocess.CompletedProcess[str]:
    """Run a command, translating launch errors into ProbeFailure."""
    try:
        return subprocess.run(
            list(argv),
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except FileNotFoundError as exc:
        raise ProbeFailure(
            FailureCategory.CLASS_NOT_AVAILABLE, f"executable not found: {argv[0]}"
        ) from exc
    except PermissionError as exc:
        raise ProbeFailure(
            FailureCategory.PERMISSION_DENIED, f"not permitted to execute: {argv[0]}"
        ) from exc
    except subprocess.TimeoutExpired as exc:
        raise ProbeFailure(
            FailureCategory.RUNTIME_FAILURE, f"timed out after {timeout:g}s: {argv[0]}"
        ) from exc


def _first_line(text: str) -> str:
    for line in text.splitlines():
        if line.strip():
            return line.strip()
    return ""


def _require_java_tool(tool: str, java_home: str | None) -> str:
    path = find_java_tool(tool, java_home)
    if path is None:
        where = f"{java_home}/bin" if java_home else "PATH"
        raise ProbeFailure(FailureCategory.CLASS_NOT_AVAILABLE, f"{tool} not found in {where}")
    return path


# ---------------------------------------------------------------------------
# Python-level probes
# ---------------------------------------------------------------------------


def module_probe(module: str) -> Callable[[], None]:
    """Probe that a Python module can be imported."""

    def action() -> None:
        try:
            importlib.import_module(module)
        except ImportError as exc:
            raise ProbeFailure(
                FailureCategory.CLASS_NOT_AVAILABLE, f"module not importable: {module}"
            ) from exc

    return action


def attribute_probe(module: str, attribute: str) -> Callable[[], None]:
    """Probe that ``module`` exposes the dotted ``attribute`` path.

    Example::

        attribute_probe("os", "sched_getaffinity")
    """

    def action() -> None:
        try:
            target: object = importlib.import_module(module)
        except ImportError as exc:
            raise ProbeFailure(
                FailureCategory.CLASS_NOT_AVAILABLE, f"module not importable: {module}"
            ) from exc
        for part in attribute.split("."):
            try:
                target = getattr(target, part)
            except AttributeError as exc:
                raise ProbeFailure(
                    FailureCategory.METHOD_NOT_AVAILABLE,
                    f"{module}.{attribute} not available",
                ) from exc

    return action


def env_probe(variable: str) -> Callable[[], None]:
    """Probe that an environment variable is set and non-empty."""

    def action() -> None:
        if not os.environ.get(variable):
            raise ProbeFailure(
                FailureCategory.RUNTIME_FAILURE, f"environment variable not set: {variable}"
            )

    return action


def command_probe(argv: Sequence[str], timeout: float = DEFAULT_TIMEOUT) -> Callable[[], None]:
    """Probe that a command runs and exits with status 0."""
    if not argv:
        raise ValueError("command_probe requires a non-empty argv")
    argv = tuple(argv)

    def action() -> None:
        proc = _run(argv, timeout)
        if proc.returncode != 0:
            detail = _first_line(proc.stderr) or _first_line(proc.stdout)
            raise ProbeFailure(
                FailureCategory.RUNTIME_FAILURE,
                f"{argv[0]} exited with status {proc.returncode}"
                + (f": {detail}" if detail else ""),
            )

    return action


# ---------------------------------------------------------------------------
# JDK probes
# ---------------------------------------------------------------------------


def java_class_probe(
    class_name: str,
    java_home: str | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Callable[[], None]:
    """Probe that a JDK class can be resolved, using ``javap``.

    This is the out-of-process equivalent of ``Class.forName``: ``javap``
    resolves the class against the selected JDK's own class library.
    """

    def action() -> None:
        javap = _require_java_tool("javap", java_home)
        proc = _run([javap, class_name], timeout)
        if proc.returncode == 0:
            return
        output = proc.stderr + proc.stdout
        if any(marker in output for marker in _CLASS_NOT_FOUND_MARKERS):
            raise ProbeFailure(FailureCategory.CLASS_NOT_AVAILABLE, f"class not found: {class_name}")
        raise ProbeFailure(
            FailureCategory.RUNTIME_FAILURE,
            f"javap failed for {class_name}: {_first_line(output) or proc.returncode}",
        )

    return action


def java_option_probe(
    option: str,
    java_home: str | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Callable[[], None]:
    """Probe that the JVM accepts a command-line option, e.g. ``-XX:+UseZGC``."""

    def action() -> None:
        java = _require_java_tool("java", java_home)
        proc = _run([java, option, "-version"], timeout)
        if proc.returncode == 0:
            return
        output = proc.stderr + proc.stdout
        if any(marker in output for marker in _UNRECOGNIZED_OPTION_MARKERS):
            raise ProbeFailure(
                FailureCategory.METHOD_NOT_AVAILABLE, f"JVM option not recognized: {option}"
            )
        raise ProbeFailure(
            FailureCategory.RUNTIME_FAILURE,
            f"JVM rejected {option}: {_first_line(output) or proc.returncode}",
        )

    return action


def java_property_probe(
    prop: str,
    java_home: str | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Callable[[], None]:
    """Probe that the JVM reports a system property (e.g. ``sun.management.compiler``)."""

    def action() -> None:
        _require_java_tool("java", java_home)
        try:
            props = read_java_properties(java_home, timeout)
        except FileNotFoundError as exc:
            raise ProbeFailure(FailureCategory.CLASS_NOT_AVAILABLE, "java not found") from exc
        except subprocess.SubprocessError as exc:
            raise ProbeFailure(
                FailureCategory.RUNTIME_FAILURE, "could not read JVM properties"
            ) from exc
        if prop not in props:
            raise ProbeFailure(FailureCategory.RUNTIME_FAILURE, f"system property not set: {prop}")

    return action

"""YAML probe manifests.

A manifest declares probes without writing Python::

    probes:
      - name: kcms
        kind: java-class
        target: sun.java2d.cmm.kcms.KcmsServiceProvider
        expected_failure_vendors: [oracle]
        min_version_for_removal: "9"
        description: Kodak color management

Supported ``kind`` values and the meaning of ``target``:

- ``module``: Python module name.
- ``attribute``: ``module:dotted.attribute``.
- ``command``: command line (string, split with shlex, or a list).
- ``java-class``: fully qualified JDK class name.
- ``java-option``: JVM command-line option.
- ``java-property``: JVM system property name.
- ``env``: environment variable name.

Vendors may be given as ids or display names (``Eclipse Temurin``). Removal
versions must be a quoted string or a major number; write ``"9.10"`` rather
than ``9.10``, which YAML reads as a float.

Manifest loading is strict: a malformed manifest is a harness
misconfiguration and raises ``ManifestError``.
"""

from __future__ import annotations

import logging
import shlex
from pathlib import Path
from typing import Any, Callable

import yaml

from compatprobe.core.probes import Probe, ProbeAction, ProbeRegistry, make_probe
from compatprobe.exceptions import ManifestError
from compatprobe.probes.actions import (
    attribute_probe,
    command_probe,
    env_probe,
    java_class_probe,
    java_option_probe,
    java_property_probe,
    module_probe,
)

logger = logging.getLogger(__name__)


def _attribute_action(target: Any, java_home: str | None) -> ProbeAction:
    module, sep, attribute = str(target).partition(":")
    if not sep or not module or not attribute:
        raise ValueError(f"attribute target must look like 'module:attr', got {target!r}")
    return attribute_probe(module, attribute)


def _command_action(target: Any, java_home: str | None) -> ProbeAction:
    if isinstance(target, list):
        argv = [str(a) for a in target]
    else:
        argv = shlex.split(str(target))
    return command_probe(argv)


_KIND_BUILDERS: dict[str, Callable[[Any, str | None], ProbeAction]] = {
    "module": lambda target, java_home: module_probe(str(target)),
    "attribute": _attribute_action,
    "command": _command_action,
    "java-class": lambda target, java_home: java_class_probe(str(target), java_home),
    "java-option": lambda target, java_home: java_option_probe(str(target), java_home),
    "java-property": lambda target, java_home: java_property_probe(str(target), java_home),
    "env": lambda target, java_home: env_probe(str(target)),
}

SUPPORTED_KINDS: tuple[str, ...] = tuple(_KIND_BUILDERS)


def _probe_from_entry(entry: Any, index: int, source: Path, java_home: str | None) -> Probe:
    where = f"{source}: probes[{index}]"
    if not isinstance(entry, dict):
        raise ManifestError(f"{where}: expected a mapping, got {type(entry).__name__}")

    name = entry.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ManifestError(f"{where}: 'name' is required")

    kind = entry.get("kind")
    builder = _KIND_BUILDERS.get(kind) if isinstance(kind, str) else None
    if builder is None:
        raise ManifestError(
            f"{where} ({name}): unsupported kind {kind!r}; "
            f"expected one of {', '.join(SUPPORTED_KINDS)}"
        )

    target = entry.get("target")
    if target in (None, "", []):
        raise ManifestError(f"{where} ({name}): 'target' is required")

    vendors = entry.get("expected_failure_vendors") or []
    if isinstance(vendors, str):
        vendors = [vendors]
    if not isinstance(vendors, list):
        raise ManifestError(f"{where} ({name}): 'expected_failure_vendors' must be a list")

    threshold = entry.get("min_version_for_removal")
    if threshold is not None and (
        isinstance(threshold, bool) or not isinstance(threshold, (str, int))
    ):
        raise ManifestError(
            f"{where} ({name}): 'min_version_for_removal' must be a version string "
            f"or major number, got {threshold!r}"
        )

    try:
        action = builder(target, java_home)
        return make_probe(
            name.strip(),
            action,
            expected_failure_vendors=[str(v) for v in vendors],
            min_version_for_removal=threshold,
            description=str(entry.get("description", "")),
        )
    except (ValueError, TypeError) as exc:
        raise ManifestError(f"{where} ({name}): {exc}") from exc


def load_manifest(path: str | Path, java_home: str | None = None) -> list[Probe]:
    """Load the probes declared in a YAML manifest.

    Args:
        path: Manifest file.
        java_home: JDK used by ``java-*`` probes; None searches ``PATH``.

    Returns:
        Probes in manifest order.

    Raises:
        ManifestError: If the file is unreadable or malformed.
    """
    source = Path(path)
    try:
        data = yaml.safe_load(source.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ManifestError(f"Cannot read manifest {source}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ManifestError(f"Invalid YAML in manifest {source}: {exc}") from exc

    if not isinstance(data, dict) or not isinstance(data.get("probes"), list):
        raise ManifestError(f"{source}: expected a top-level 'probes' list")

    probes = [
        _probe_from_entry(entry, i, source, java_home)
        for i, entry in enumerate(data["probes"])
    ]
    logger.debug("Loaded %d probes from %s", len(probes), source)
    return probes


def registry_from_manifest(
    path: str | Path,
    java_home: str | None = None,
    base: ProbeRegistry | None = None,
) -> ProbeRegistry:
    """Register a manifest's probes, optionally on top of *base*.

    Raises:
        ManifestError: If the manifest is malformed.
        DuplicateProbeError: If a manifest probe reuses an existing name.
    """
    registry = base if base is not None else ProbeRegistry()
    for probe in load_manifest(path, java_home):
        registry.register(probe)
    return registry

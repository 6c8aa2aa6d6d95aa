"""Shared wiring for CLI commands: context resolution and registry assembly.

Command-line overrides win over introspection. The host runtime is only
asked for its identity when at least one of vendor/version was not supplied.
"""

from __future__ import annotations

import logging
from typing import Sequence

from compatprobe.core.environment import EnvironmentContext, build_context
from compatprobe.core.probes import ProbeRegistry
from compatprobe.introspection import (
    RuntimeIdentity,
    detect_java_identity,
    detect_python_identity,
)
from compatprobe.probes import default_registry, registry_from_manifest

logger = logging.getLogger(__name__)

RUNTIME_CHOICES = ("java", "python")


def resolve_identity(
    vendor: str | None,
    runtime_version: str | None,
    java_home: str | None,
    runtime: str = "java",
) -> RuntimeIdentity:
    """Combine CLI overrides with the detected runtime identity."""
    if vendor is not None and runtime_version is not None:
        return RuntimeIdentity(vendor=vendor, version=runtime_version, source="override")

    if runtime == "python":
        detected = detect_python_identity()
    else:
        detected = detect_java_identity(java_home)
    logger.debug("Detected runtime identity: %s", detected)

    return RuntimeIdentity(
        vendor=vendor if vendor is not None else detected.vendor,
        version=runtime_version if runtime_version is not None else detected.version,
        source=detected.source if vendor is None and runtime_version is None else "mixed",
    )


def resolve_context(
    vendor: str | None,
    runtime_version: str | None,
    java_home: str | None,
    runtime: str = "java",
) -> EnvironmentContext:
    identity = resolve_identity(vendor, runtime_version, java_home, runtime)
    return build_context(identity.vendor, identity.version)


def build_registry(
    manifests: Sequence[str],
    java_home: str | None,
    include_builtin: bool = True,
    selected: Sequence[str] = (),
) -> ProbeRegistry:
    """Assemble the run's registry from the built-in catalog and manifests.

    Raises:
        HarnessError: On duplicate names, malformed manifests, or unknown
            selected probes.
    """
    registry = default_registry(java_home) if include_builtin else ProbeRegistry()
    for manifest in manifests:
        registry_from_manifest(manifest, java_home, base=registry)
    if selected:
        registry = registry.select(selected)
    return registry

"""Probe implementations: action factories, built-in catalog, manifests."""

from compatprobe.probes.actions import (
    attribute_probe,
    command_probe,
    env_probe,
    java_class_probe,
    java_option_probe,
    java_property_probe,
    module_probe,
)
from compatprobe.probes.catalog import builtin_probes, default_registry
from compatprobe.probes.manifest import SUPPORTED_KINDS, load_manifest, registry_from_manifest

__all__ = [
    "SUPPORTED_KINDS",
    "attribute_probe",
    "builtin_probes",
    "command_probe",
    "default_registry",
    "env_probe",
    "java_class_probe",
    "java_option_probe",
    "java_property_probe",
    "load_manifest",
    "module_probe",
    "registry_from_manifest",
]

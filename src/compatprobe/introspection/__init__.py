"""Host runtime introspection (raw vendor/version strings)."""

from compatprobe.introspection.runtime import (
    RuntimeIdentity,
    detect_java_identity,
    detect_python_identity,
    find_java_tool,
    parse_properties_listing,
    read_java_properties,
)

__all__ = [
    "RuntimeIdentity",
    "detect_java_identity",
    "detect_python_identity",
    "find_java_tool",
    "parse_properties_listing",
    "read_java_properties",
]

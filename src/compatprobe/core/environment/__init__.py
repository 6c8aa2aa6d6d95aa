"""Environment context for compatibility classification.

Submodules
----------
- ``models``: RuntimeVersion, EnvironmentContext, normalization helpers.

All public names are re-exported here::

    from compatprobe.core.environment import EnvironmentContext, build_context
"""

from compatprobe.core.environment.models import (
    KNOWN_VENDORS,
    UNKNOWN_VENDOR,
    EnvironmentContext,
    RuntimeVersion,
    VersionLike,
    build_context,
    normalize_vendor,
    parse_version,
)

__all__ = [
    "KNOWN_VENDORS",
    "UNKNOWN_VENDOR",
    "EnvironmentContext",
    "RuntimeVersion",
    "VersionLike",
    "build_context",
    "normalize_vendor",
    "parse_version",
]

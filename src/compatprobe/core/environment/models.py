"""Environment context: the normalized vendor/version identity of a runtime.

The context is built exactly once per run from the raw identity strings a
host runtime reports about itself, and is then shared read-only by every
probe evaluation. Construction is total: malformed input degrades to the
``"unknown"`` vendor and the unknown version sentinel instead of raising.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Union

UNKNOWN_VENDOR = "unknown"

# Ordered (substring, vendor id) rules. First match wins.
_VENDOR_RULES: tuple[tuple[str, str], ...] = (
    ("oracle", "oracle"),
    ("eclipse", "eclipse-temurin"),
    ("adoptium", "eclipse-temurin"),
    ("temurin", "eclipse-temurin"),
    ("openjdk", "openjdk"),
)

KNOWN_VENDORS: frozenset[str] = frozenset(v for _, v in _VENDOR_RULES)

# Leading integer runs separated by dots, e.g. "11.0.2+9" -> 11, 0, 2
_VERSION_RE = re.compile(r"^\s*v?(\d+)(?:\.(\d+))?(?:\.(\d+))?")


@dataclass(frozen=True, order=False)
class RuntimeVersion:
    """A structured (major, minor, patch) runtime version.

    Equality and ordering compare the numeric triple only. The ``known``
    flag marks the ``(0, 0, 0)`` sentinel produced when a version string
    cannot be parsed.

    Attributes:
        major: Major release number.
        minor: Minor release number.
        patch: Patch/update number.
        known: False for the unknown sentinel.
    """

    major: int = 0
    minor: int = 0
    patch: int = 0
    known: bool = field(default=True, compare=False)

    @classmethod
    def unknown(cls) -> RuntimeVersion:
        """Return the sentinel used when a version cannot be parsed."""
        return cls(0, 0, 0, known=False)

    @classmethod
    def parse(cls, value: VersionLike) -> RuntimeVersion:
        """Coerce a string, integer or RuntimeVersion into a RuntimeVersion.

        Strings go through ``parse_version`` and therefore never raise.
        """
        if isinstance(value, RuntimeVersion):
            return value
        if isinstance(value, bool):
            return cls.unknown()
        if isinstance(value, int):
            return cls(value, 0, 0) if value >= 0 else cls.unknown()
        return parse_version(str(value))

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def __lt__(self, other: RuntimeVersion) -> bool:
        if not isinstance(other, RuntimeVersion):
            return NotImplemented
        return self.as_tuple() < other.as_tuple()

    def __le__(self, other: RuntimeVersion) -> bool:
        if not isinstance(other, RuntimeVersion):
            return NotImplemented
        return self.as_tuple() <= other.as_tuple()

    def __gt__(self, other: RuntimeVersion) -> bool:
        if not isinstance(other, RuntimeVersion):
            return NotImplemented
        return self.as_tuple() > other.as_tuple()

    def __ge__(self, other: RuntimeVersion) -> bool:
        if not isinstance(other, RuntimeVersion):
            return NotImplemented
        return self.as_tuple() >= other.as_tuple()

    def __str__(self) -> str:
        if not self.known:
            return "unknown"
        return f"{self.major}.{self.minor}.{self.patch}"


VersionLike = Union[str, int, RuntimeVersion]


def normalize_vendor(raw: str | None) -> str:
    """Map a raw vendor string onto a normalized vendor id.

    Checks run in priority order Oracle > Eclipse/Adoptium/Temurin >
    OpenJDK, so "Oracle Corporation (OpenJDK build)" is still "oracle".

    Args:
        raw: Vendor string as reported by the runtime, e.g. "Eclipse Adoptium".

    Returns:
        One of "oracle", "eclipse-temurin", "openjdk" or "unknown".
    """
    if not raw:
        return UNKNOWN_VENDOR
    lowered = raw.strip().lower()
    for needle, vendor_id in _VENDOR_RULES:
        if needle in lowered:
            return vendor_id
    return UNKNOWN_VENDOR


def parse_version(raw: str | None) -> RuntimeVersion:
    """Parse the leading dotted integer runs of a raw version string.

    Up to three components are read; missing ones default to 0. The legacy
    JDK scheme ``1.N.x`` (``1.8.0_292``) is folded onto ``N.x`` so that
    pre-JEP 223 releases compare by their real major number.

    Never raises. Unparsable input yields ``RuntimeVersion.unknown()``.

    Examples::

        parse_version("11.0.2+9")   # 11.0.2
        parse_version("21")         # 21.0.0
        parse_version("1.8.0_292")  # 8.0.0
        parse_version("garbage")    # unknown
    """
    if not raw:
        return RuntimeVersion.unknown()
    m = _VERSION_RE.match(raw)
    if not m:
        return RuntimeVersion.unknown()
    parts = [int(g) if g is not None else 0 for g in m.groups()]
    if parts[0] == 1 and m.group(2) is not None and parts[1] >= 2:
        # 1.8.0 -> 8.0.0
        parts = [parts[1], parts[2], 0]
    return RuntimeVersion(parts[0], parts[1], parts[2])


@dataclass(frozen=True)
class EnvironmentContext:
    """Immutable snapshot of the host runtime's vendor and version.

    Attributes:
        vendor_id: Normalized lowercase vendor identifier.
        version: Parsed runtime version (possibly the unknown sentinel).
        raw_vendor: Vendor string exactly as supplied. Reporting only.
        raw_version: Version string exactly as supplied. Reporting only.
    """

    vendor_id: str
    version: RuntimeVersion
    raw_vendor: str = ""
    raw_version: str = ""

    def as_dict(self) -> dict[str, str]:
        return {
            "vendor": self.vendor_id,
            "version": str(self.version),
            "raw_vendor": self.raw_vendor,
            "raw_version": self.raw_version,
        }


def build_context(raw_vendor: str | None, raw_version: str | None) -> EnvironmentContext:
    """Build the run's EnvironmentContext from raw identity strings.

    This function is total: it never raises, whatever the input.

    Args:
        raw_vendor: Self-reported vendor string of the host runtime.
        raw_version: Self-reported version string of the host runtime.

    Returns:
        A normalized, immutable EnvironmentContext.
    """
    return EnvironmentContext(
        vendor_id=normalize_vendor(raw_vendor),
        version=parse_version(raw_version),
        raw_vendor=raw_vendor or "",
        raw_version=raw_version or "",
    )

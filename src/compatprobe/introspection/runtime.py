"""Host runtime introspection.

Supplies the raw vendor/version strings the environment context is built
from. For a JDK this means asking the ``java`` launcher to print its system
properties::

    java -XshowSettings:properties -version

and reading ``java.vendor`` / ``java.version`` from the listing it writes to
stderr. Introspection never raises: when Java cannot be run the identity is
left empty, which the context normalizes to vendor/version "unknown".
"""

from __future__ import annotations

import logging
import os
import platform
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT: float = 30.0


@dataclass(frozen=True)
class RuntimeIdentity:
    """Raw, unnormalized identity strings reported by a runtime.

    Attributes:
        vendor: Vendor string, e.g. "Eclipse Adoptium". Empty if unknown.
        version: Version string, e.g. "17.0.9". Empty if unknown.
        source: Where the strings came from ("java", "python", "override").
    """

    vendor: str = ""
    version: str = ""
    source: str = ""


def find_java_tool(tool: str, java_home: str | os.PathLike[str] | None = None) -> str | None:
    """Locate a JDK executable (``java``, ``javap``...).

    Looks in ``<java_home>/bin`` when *java_home* is given, otherwise on
    ``PATH``.

    Returns:
        Path to the executable, or None if it cannot be found.
    """
    if java_home:
        return shutil.which(tool, path=str(Path(java_home) / "bin"))
    return shutil.which(tool)


def parse_properties_listing(text: str) -> dict[str, str]:
    """Parse the ``-XshowSettings:properties`` listing into a dict.

    Only ``key = value`` lines are kept. Continuation lines of multi-valued
    properties (``java.library.path`` etc.) carry no ``=`` and are skipped.
    """
    props: dict[str, str] = {}
    for line in text.splitlines():
        if " = " not in line:
            continue
        key, _, value = line.strip().partition(" = ")
        if key and " " not in key:
            props[key] = value.strip()
    return props


def read_java_properties(
    java_home: str | os.PathLike[str] | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> dict[str, str]:
    """Run the java launcher and return its system properties.

    Raises:
        FileNotFoundError: If no ``java`` executable can be found.
        subprocess.SubprocessError: If the launcher times out.
    """
    java = find_java_tool("java", java_home)
    if java is None:
        raise FileNotFoundError(f"java executable not found (java_home={java_home!r})")
    proc = subprocess.run(
        [java, "-XshowSettings:properties", "-version"],
        capture_output=True,
        text=True,
        timeout=timeout,
        check=False,
    )
    # The launcher writes the listing to stderr.
    return parse_properties_listing(proc.stderr + "\n" + proc.stdout)


def detect_java_identity(
    java_home: str | os.PathLike[str] | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> RuntimeIdentity:
    """Detect the vendor and version of a JDK.

    Args:
        java_home: JDK installation directory; None searches ``PATH``.
        timeout: Seconds to wait for the launcher.

    Returns:
        The reported identity, or an empty identity if Java could not run.
    """
    try:
        props = read_java_properties(java_home, timeout)
    except (OSError, subprocess.SubprocessError):
        logger.warning("Could not introspect Java runtime (java_home=%s)", java_home, exc_info=True)
        return RuntimeIdentity(source="java")
    return RuntimeIdentity(
        vendor=props.get("java.vendor", ""),
        version=props.get("java.version", ""),
        source="java",
    )


def detect_python_identity() -> RuntimeIdentity:
    """Report the running Python interpreter's implementation and version."""
    return RuntimeIdentity(
        vendor=platform.python_implementation(),
        version=platform.python_version(),
        source="python",
    )

"""compatprobe: Runtime capability probes and vendor compatibility verdicts."""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "compatprobe contributors"
__license__ = "MIT"

"""Verdict: the classified meaning of a probe outcome."""

from __future__ import annotations

from enum import Enum


class Verdict(str, Enum):
    """Three-way classification of a probe outcome.

    COMPATIBLE -- the probe succeeded.
    EXPECTED_ABSENCE -- the probe failed, but the feature is known to be
        removed or restricted for the detected vendor/version.
    FATAL_INCOMPATIBILITY -- the probe failed and no declared rule excuses it.
    """

    COMPATIBLE = "compatible"
    EXPECTED_ABSENCE = "expected-absence"
    FATAL_INCOMPATIBILITY = "fatal-incompatibility"

"""Compatibility classification.

Submodules
----------
- ``models``: Verdict enum.
- ``policy``: classify() and explain().
"""

from compatprobe.core.classification.models import Verdict
from compatprobe.core.classification.policy import classify, explain

__all__ = ["Verdict", "classify", "explain"]

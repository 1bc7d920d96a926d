"""
Shared compute infrastructure for PyStaz.

IMPORTANT: This is NOT where the statistical engines live. Those go in
descriptive/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Precision tiers for numeric comparison
"""

from pystaz.core.compute.timing import Timer, timed
from pystaz.core.compute.tolerances import ToleranceTier, CPU_FP64, select_tolerance

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ToleranceTier",
    "CPU_FP64",
    "select_tolerance",
]

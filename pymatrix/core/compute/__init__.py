"""
Shared compute infrastructure for PyMatrix.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers used by comparisons and elimination
"""

from pymatrix.core.compute.timing import Timer, timed
from pymatrix.core.compute.tolerances import (
    ToleranceTier,
    ELEMENTWISE,
    ROUND_TRIP,
    DEFAULT_TOLERANCE,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ToleranceTier",
    "ELEMENTWISE",
    "ROUND_TRIP",
    "DEFAULT_TOLERANCE",
]

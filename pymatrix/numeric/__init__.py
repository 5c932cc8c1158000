"""
Numeric modes, per-mode arithmetic and mode coercion.

Public API:
    NumericMode       - REAL, INTEGER, COMPLEX with promotion precedence
    detect_mode(grid) - Dominant mode of a grid of entries
    combine_modes()   - Precedence maximum of several modes
    ops_for(mode)     - Operation set for a mode
    coerce(v, mode)   - Convert a single entry into a mode
"""

from pymatrix.numeric.modes import (
    NumericMode,
    classify_entry,
    detect_mode,
    combine_modes,
)
from pymatrix.numeric.coercion import coerce
from pymatrix.numeric.ops import (
    NumericOps,
    RealOps,
    IntegerOps,
    ComplexOps,
    ops_for,
)

__all__ = [
    "NumericMode",
    "classify_entry",
    "detect_mode",
    "combine_modes",
    "coerce",
    "NumericOps",
    "RealOps",
    "IntegerOps",
    "ComplexOps",
    "ops_for",
]

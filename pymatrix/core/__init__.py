"""
Core infrastructure for PyMatrix.

This module provides shared abstractions and utilities used by the
numeric and matrix subpackages.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and tolerance tiers
"""

from pymatrix.core.result import Result
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    InvalidDimensionsError,
    DimensionError,
    ShapeMismatchError,
    DimensionMismatchError,
    SizeMismatchError,
    IndexOutOfRangeError,
    NumericalError,
    DivisionByZeroError,
    NonExactDivisionError,
    SingularMatrixError,
    UnsupportedOperationError,
    UnsupportedCoercionError,
    PrecisionLossWarning,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "InvalidDimensionsError",
    "DimensionError",
    "ShapeMismatchError",
    "DimensionMismatchError",
    "SizeMismatchError",
    "IndexOutOfRangeError",
    "NumericalError",
    "DivisionByZeroError",
    "NonExactDivisionError",
    "SingularMatrixError",
    "UnsupportedOperationError",
    "UnsupportedCoercionError",
    # Warnings
    "PrecisionLossWarning",
]

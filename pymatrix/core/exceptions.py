"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Where a builtin exception already names the
condition (IndexError, ZeroDivisionError) the library exception inherits
from it as well, so generic handlers keep working.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from __future__ import annotations

from typing import Any


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs (entries, fill values, grids) fail
    validation checks.
    """
    pass


class InvalidDimensionsError(ValidationError):
    """
    Row or column count is not a positive integer.

    Attributes:
        rows: Requested row count
        cols: Requested column count
    """

    def __init__(self, message: str, rows: Any = None, cols: Any = None):
        super().__init__(message)
        self.rows = rows
        self.cols = cols


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Base class for the shape-related errors below.
    """
    pass


class ShapeMismatchError(DimensionError):
    """
    Input grid is not rectangular (jagged rows) or not two-dimensional.

    Attributes:
        row: Index of the first offending row, if known
        expected_cols: Column count taken from the first row
        actual_cols: Column count of the offending row
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        expected_cols: int | None = None,
        actual_cols: int | None = None
    ):
        super().__init__(message)
        self.row = row
        self.expected_cols = expected_cols
        self.actual_cols = actual_cols


class DimensionMismatchError(DimensionError):
    """
    Operand shapes are incompatible for a binary operation.

    Attributes:
        left_shape: (rows, cols) of the left operand
        right_shape: (rows, cols) of the right operand
    """

    def __init__(
        self,
        message: str,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape


class SizeMismatchError(DimensionError):
    """
    Operation requires a square matrix.

    Attributes:
        operation: Name of the operation that was attempted
        shape: (rows, cols) of the matrix
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.shape = shape


class IndexOutOfRangeError(PyMatrixError, IndexError):
    """
    Element index outside [0, rows) x [0, cols).

    Attributes:
        row: Requested row index
        col: Requested column index
        shape: (rows, cols) of the matrix
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        col: int | None = None,
        shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.row = row
        self.col = col
        self.shape = shape


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from arithmetic during elimination.
    """
    pass


class DivisionByZeroError(NumericalError, ZeroDivisionError):
    """Divisor is the additive identity of the active mode."""
    pass


class NonExactDivisionError(NumericalError):
    """
    Integer division would leave a remainder.

    Only raised in integer mode, which never produces fractions.

    Attributes:
        dividend: The numerator
        divisor: The denominator
    """

    def __init__(self, message: str, dividend: int | None = None, divisor: int | None = None):
        super().__init__(message)
        self.dividend = dividend
        self.divisor = divisor


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when an operation requires invertibility but elimination finds
    a column with no usable pivot.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        rank: Number of pivots found before failing, if known
        expected_rank: Expected rank (the matrix order)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.rank = rank
        self.expected_rank = expected_rank


class UnsupportedOperationError(PyMatrixError):
    """
    Operation is not defined for the matrix's numeric mode.

    Attributes:
        operation: Name of the operation that was attempted
        mode: The numeric mode that does not support it
    """

    def __init__(self, message: str, operation: str | None = None, mode: Any = None):
        super().__init__(message)
        self.operation = operation
        self.mode = mode


class UnsupportedCoercionError(UnsupportedOperationError):
    """
    Value cannot be converted into the target numeric mode.

    Attributes:
        value: The value that failed to convert
        target_mode: The mode it was being converted into
    """

    def __init__(self, message: str, value: Any = None, target_mode: Any = None):
        super().__init__(message, operation='coerce', mode=target_mode)
        self.value = value
        self.target_mode = target_mode


class PrecisionLossWarning(UserWarning):
    """A value lost its fractional part while converting to integer mode."""
    pass

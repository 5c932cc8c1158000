"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except NumPy scalars/arrays to Python values)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

from pymatrix.core.exceptions import (
    IndexOutOfRangeError,
    InvalidDimensionsError,
    ShapeMismatchError,
    ValidationError,
)

Entry = int | float | complex


def check_positive_int(value: Any, name: str) -> int:
    """
    Verify a dimension is a positive integer.

    NumPy integer scalars are accepted and converted. Booleans and
    integral floats (3.0) are rejected.

    Args:
        value: Dimension to validate
        name: Parameter name for error messages

    Returns:
        The dimension as a Python int

    Raises:
        InvalidDimensionsError: If value is not a positive integer
    """
    if isinstance(value, np.integer):
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidDimensionsError(
            f"{name}: must be a positive integer, got {type(value).__name__} {value!r}"
        )
    if value <= 0:
        raise InvalidDimensionsError(f"{name}: must be a positive integer, got {value}")
    return value


def check_entry(value: Any, name: str) -> Entry:
    """
    Validate a single matrix entry.

    Accepts int, float and complex (and their NumPy scalar counterparts,
    which are unwrapped to the Python type). Rejects bool, non-numeric
    objects and non-finite floating values.

    Args:
        value: Candidate entry
        name: Parameter name for error messages

    Returns:
        The entry as a Python int, float or complex

    Raises:
        ValidationError: If the entry is not an acceptable number
    """
    if isinstance(value, np.generic):
        value = value.item()

    if isinstance(value, bool) or not isinstance(value, (int, float, complex)):
        raise ValidationError(
            f"{name}: expected int, float or complex, got {type(value).__name__}"
        )

    if not isinstance(value, int) and not np.isfinite(value):
        raise ValidationError(f"{name}: non-finite value {value!r}")

    return value


def check_index(row: Any, col: Any, shape: tuple[int, int]) -> None:
    """
    Verify (row, col) lies inside [0, rows) x [0, cols).

    Negative indices are out of range; there is no wrap-around.

    Raises:
        IndexOutOfRangeError: If either index is not an int in range
    """
    rows, cols = shape
    for index, bound, axis in ((row, rows, 'row'), (col, cols, 'col')):
        if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
            raise IndexOutOfRangeError(
                f"{axis} index must be an integer, got {type(index).__name__}",
                row=row, col=col, shape=shape,
            )
        if not 0 <= index < bound:
            raise IndexOutOfRangeError(
                f"Index ({row}, {col}) out of range for {rows} x {cols} matrix",
                row=row, col=col, shape=shape,
            )


def _as_row(row: Any, index: int, name: str) -> Sequence:
    if isinstance(row, np.ndarray):
        if row.ndim != 1:
            raise ShapeMismatchError(
                f"{name}: row {index} has {row.ndim} dimensions, expected 1",
                row=index,
            )
        return row.tolist()
    if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
        raise ShapeMismatchError(
            f"{name}: row {index} is {type(row).__name__}, expected a sequence of entries",
            row=index,
        )
    return row


def check_grid(grid: Any, name: str) -> list[list[Entry]]:
    """
    Validate a rectangular two-dimensional grid of entries.

    Accepts nested sequences (lists, tuples) or a 2D numpy.ndarray.

    Args:
        grid: Candidate grid
        name: Parameter name for error messages

    Returns:
        A fresh list of lists holding validated entries

    Raises:
        ShapeMismatchError: If the grid is not 2D or its rows are jagged
        InvalidDimensionsError: If the grid has no rows or no columns
        ValidationError: If any entry is invalid
    """
    if isinstance(grid, np.ndarray):
        if grid.ndim != 2:
            raise ShapeMismatchError(
                f"{name}: expected 2D array, got {grid.ndim}D with shape {grid.shape}"
            )
        grid = grid.tolist()

    if isinstance(grid, (str, bytes)) or not isinstance(grid, Sequence):
        raise ShapeMismatchError(
            f"{name}: expected a 2D sequence, got {type(grid).__name__}"
        )
    if len(grid) == 0:
        raise InvalidDimensionsError(f"{name}: grid has no rows", rows=0)

    rows = [_as_row(row, i, name) for i, row in enumerate(grid)]
    n_cols = len(rows[0])
    if n_cols == 0:
        raise InvalidDimensionsError(
            f"{name}: grid has no columns", rows=len(rows), cols=0
        )

    result = []
    for i, row in enumerate(rows):
        if len(row) != n_cols:
            raise ShapeMismatchError(
                f"{name}: jagged rows, row 0 has {n_cols} entries but row {i} has {len(row)}",
                row=i,
                expected_cols=n_cols,
                actual_cols=len(row),
            )
        result.append([check_entry(v, f"{name}[{i}][{j}]") for j, v in enumerate(row)])
    return result

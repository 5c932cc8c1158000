"""
Numeric modes and mode detection.

A matrix holds entries of one of three representations:

    REAL     Python float
    INTEGER  Python int (arbitrary precision)
    COMPLEX  Python complex

Precedence for detection and for combining operands:
COMPLEX > INTEGER > REAL. A single complex entry makes the whole matrix
complex; otherwise a single int entry makes it integer (and any float
entries are truncated into ints when the matrix resolves its mode).
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum


class NumericMode(Enum):
    """Active numeric representation of a matrix's entries."""
    REAL = 'real'
    INTEGER = 'integer'
    COMPLEX = 'complex'

    @property
    def precedence(self) -> int:
        """Promotion rank; the higher value wins when modes are combined."""
        return _PRECEDENCE[self]


_PRECEDENCE = {
    NumericMode.REAL: 0,
    NumericMode.INTEGER: 1,
    NumericMode.COMPLEX: 2,
}


def classify_entry(value: int | float | complex) -> NumericMode:
    """Mode of a single validated entry."""
    if isinstance(value, complex):
        return NumericMode.COMPLEX
    if isinstance(value, int):
        return NumericMode.INTEGER
    return NumericMode.REAL


def detect_mode(grid: Iterable[Iterable[int | float | complex]]) -> NumericMode:
    """
    Determine the dominant mode of a grid.

    Scans every entry: any complex entry gives COMPLEX, else any int entry
    gives INTEGER, else REAL. An empty grid is REAL. Never fails.
    """
    found_integer = False
    for row in grid:
        for value in row:
            mode = classify_entry(value)
            if mode is NumericMode.COMPLEX:
                return mode
            if mode is NumericMode.INTEGER:
                found_integer = True
    return NumericMode.INTEGER if found_integer else NumericMode.REAL


def combine_modes(*modes: NumericMode) -> NumericMode:
    """Precedence maximum of the given modes (REAL when none are given)."""
    return max(modes, key=lambda m: m.precedence, default=NumericMode.REAL)

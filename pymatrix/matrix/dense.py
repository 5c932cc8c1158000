"""
Dense matrix container with hybrid numeric entries.

A Matrix holds a rows x cols grid of Python floats, ints or complex
numbers. Its numeric mode (REAL, INTEGER, COMPLEX) is detected lazily from
the entries on first use and cached; set() invalidates the cache because a
new entry can change the dominant mode (one complex entry promotes a real
matrix to complex).

When the mode resolves, every entry is converted into it. Floats in an
integer-mode matrix are truncated toward zero; this is lossy and emits a
PrecisionLossWarning when a fractional part is discarded.

Not thread-safe: set() mutates the grid and the cached mode without
locking. Read-only operations never modify the receiver and may run
concurrently on an instance nobody is mutating.

Usage:
    A = Matrix.from_array([[1.0, 2.0], [3.0, 4.0]])
    A.determinant()           # -2.0
    A.inverse().to_array()    # [[-2.0, 1.0], [1.5, -0.5]]
    A.type()                  # 'Square Matrix'
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.compute.tolerances import DEFAULT_TOLERANCE
from pymatrix.core.exceptions import (
    DimensionMismatchError,
    SizeMismatchError,
    UnsupportedOperationError,
    ValidationError,
)
from pymatrix.core.validation import (
    Entry,
    check_entry,
    check_grid,
    check_index,
    check_positive_int,
)
from pymatrix.matrix import _elimination, _properties
from pymatrix.numeric.modes import NumericMode, combine_modes, detect_mode
from pymatrix.numeric.ops import NumericOps, ops_for

_NUMPY_DTYPES = {
    NumericMode.REAL: np.float64,
    NumericMode.INTEGER: object,
    NumericMode.COMPLEX: np.complex128,
}


class Matrix:
    """
    Dense rows x cols matrix over floats, arbitrary-precision ints or complex.

    Construction:
        Matrix(rows, cols, fill=0.0)
        Matrix.from_array(grid, mode=None)
        Matrix.identity(n, mode=NumericMode.REAL)
    """

    def __init__(self, rows: int, cols: int, fill: Entry = 0.0):
        self._rows = check_positive_int(rows, 'rows')
        self._cols = check_positive_int(cols, 'cols')
        fill = check_entry(fill, 'fill')
        self._data: list[list[Entry]] = [[fill] * self._cols for _ in range(self._rows)]
        self._mode: NumericMode | None = None
        self._ops: NumericOps | None = None

    @classmethod
    def _wrap(cls, data: list[list[Entry]], mode: NumericMode | None = None) -> Matrix:
        """Adopt an already-validated grid; entries must be in mode if given."""
        m = cls.__new__(cls)
        m._rows = len(data)
        m._cols = len(data[0])
        m._data = data
        m._mode = mode
        m._ops = ops_for(mode) if mode is not None else None
        return m

    @classmethod
    def from_array(cls, grid: Any, mode: NumericMode | str | None = None) -> Matrix:
        """
        Build a Matrix from a rectangular grid.

        Parameters
        ----------
        grid : sequence of sequences, or 2D numpy.ndarray
            Entries may be int, float or complex (or NumPy scalars of those
            kinds). The input is copied, never aliased.
        mode : NumericMode or str, optional
            Force a mode instead of detecting it; every entry is coerced
            into it (see pymatrix.numeric.coerce).

        Raises
        ------
        ShapeMismatchError
            If rows are jagged or the input is not two-dimensional.
        InvalidDimensionsError
            If the grid has no rows or no columns.
        ValidationError
            If an entry is not a finite number.
        UnsupportedCoercionError
            If an entry cannot be coerced into a forced mode.
        """
        m = cls._wrap(check_grid(grid, 'grid'))
        if mode is None:
            m._resolve_mode()
        else:
            m._apply_mode(NumericMode(mode))
        return m

    @classmethod
    def identity(cls, n: int, mode: NumericMode | str = NumericMode.REAL) -> Matrix:
        """n x n identity matrix in the given mode."""
        n = check_positive_int(n, 'n')
        ops = ops_for(NumericMode(mode))
        data = [[ops.one() if i == j else ops.zero() for j in range(n)] for i in range(n)]
        return cls._wrap(data, ops.mode)

    # --- Mode management ---

    def _apply_mode(self, mode: NumericMode) -> None:
        ops = ops_for(mode)
        self._data = [[ops.convert(v) for v in row] for row in self._data]
        self._mode = mode
        self._ops = ops

    def _resolve_mode(self) -> None:
        self._apply_mode(detect_mode(self._data))

    def _ensure_mode(self) -> NumericMode:
        if self._mode is None:
            self._resolve_mode()
        return self._mode

    @property
    def mode(self) -> NumericMode:
        """Active numeric mode, detected from the entries on first access."""
        return self._ensure_mode()

    @property
    def ops(self) -> NumericOps:
        """Operation set for the active mode."""
        if self._ops is None:
            self._resolve_mode()
        return self._ops

    def _resolved(self) -> tuple[list[list[Entry]], NumericOps]:
        # Resolution may replace self._data, so read the grid after it.
        ops = self.ops
        return self._data, ops

    # --- Shape ---

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    def dimension(self) -> str:
        """Shape as text, e.g. '2 x 3'."""
        return f"{self._rows} x {self._cols}"

    # --- Element access and copies ---

    def get(self, row: int, col: int) -> Entry:
        """Entry at (row, col), converted into the active mode."""
        check_index(row, col, self.shape)
        self._ensure_mode()
        return self._data[row][col]

    def set(self, row: int, col: int, value: Entry) -> None:
        """
        Replace the entry at (row, col).

        Invalidates the cached mode; it is re-detected on next use.
        """
        check_index(row, col, self.shape)
        self._data[row][col] = check_entry(value, 'value')
        self._mode = None
        self._ops = None

    def clone(self) -> Matrix:
        """Independent copy with the same entries and cached mode."""
        return Matrix._wrap([list(row) for row in self._data], self._mode)

    def to_array(self) -> list[list[Entry]]:
        """Entries as a fresh list of lists."""
        self._ensure_mode()
        return [list(row) for row in self._data]

    def to_numpy(self) -> NDArray[Any]:
        """
        Entries as a numpy.ndarray.

        REAL gives float64, COMPLEX gives complex128, INTEGER gives an
        object array of Python ints so no precision is lost.
        """
        return np.array(self.to_array(), dtype=_NUMPY_DTYPES[self.mode])

    def to_display(self) -> list[list[str]]:
        """Entries formatted with the active mode's display form."""
        ops = self.ops
        return [[ops.to_display(v) for v in row] for row in self._data]

    def __str__(self) -> str:
        cells = self.to_display()
        widths = [max(len(row[j]) for row in cells) for j in range(self._cols)]
        return "\n".join(
            "  ".join(cell.rjust(w) for cell, w in zip(row, widths)) for row in cells
        )

    def __repr__(self) -> str:
        return f"Matrix({self.dimension()}, mode={self.mode.value}, data={self.to_display()})"

    # --- Algebra ---

    def transpose(self) -> Matrix:
        """New cols x rows matrix with entries mirrored across the diagonal."""
        mode = self.mode
        return Matrix._wrap([list(col) for col in zip(*self._data)], mode)

    def conjugate_transpose(self) -> Matrix:
        """Transpose with imaginary parts negated (plain transpose outside complex mode)."""
        ops = self.ops
        return Matrix._wrap(
            [[ops.conjugate(v) for v in col] for col in zip(*self._data)],
            ops.mode,
        )

    def multiply(self, other: Matrix) -> Matrix:
        """
        Matrix product self @ other.

        Both operands are coerced into the higher-precedence of the two
        modes before accumulating; the result carries that mode.

        Raises:
            ValidationError: If other is not a Matrix
            DimensionMismatchError: If self.cols != other.rows
        """
        if not isinstance(other, Matrix):
            raise ValidationError(
                f"other: expected Matrix, got {type(other).__name__}"
            )
        if self._cols != other._rows:
            raise DimensionMismatchError(
                f"Cannot multiply {self.dimension()} by {other.dimension()}: "
                f"left cols ({self._cols}) != right rows ({other._rows})",
                left_shape=self.shape,
                right_shape=other.shape,
            )

        mode = combine_modes(self.mode, other.mode)
        ops = ops_for(mode)
        a = [[ops.convert(v) for v in row] for row in self._data]
        b = [[ops.convert(v) for v in row] for row in other._data]

        result = []
        for i in range(self._rows):
            out_row = []
            for j in range(other._cols):
                total = ops.zero()
                for k in range(self._cols):
                    total = ops.add(total, ops.mul(a[i][k], b[k][j]))
                out_row.append(total)
            result.append(out_row)
        return Matrix._wrap(result, mode)

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def equals(self, other: Any, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """
        Element-wise equality within tolerance.

        False unless other is a Matrix of the same shape and the same
        resolved mode. Integer mode compares exactly.
        """
        if not isinstance(other, Matrix):
            return False
        if self.shape != other.shape:
            return False
        if self.mode is not other.mode:
            return False
        ops = self.ops
        return all(
            ops.eq(a, b, tolerance)
            for row_a, row_b in zip(self._data, other._data)
            for a, b in zip(row_a, row_b)
        )

    def _require_square(self, operation: str) -> None:
        if self._rows != self._cols:
            raise SizeMismatchError(
                f"{operation} requires a square matrix, got {self.dimension()}",
                operation=operation,
                shape=self.shape,
            )

    def determinant(self) -> Entry:
        """
        Determinant by Gaussian elimination.

        Raises:
            SizeMismatchError: If the matrix is not square
            NonExactDivisionError: Integer mode needed a fractional multiplier
        """
        self._require_square('determinant')
        return _elimination.determinant(*self._resolved())

    def inverse(self) -> Matrix:
        """
        Inverse by Gauss-Jordan elimination.

        Raises:
            SizeMismatchError: If the matrix is not square
            UnsupportedOperationError: In integer mode
            SingularMatrixError: If the matrix is not invertible
        """
        self._require_square('inverse')
        data, ops = self._resolved()
        return Matrix._wrap(_elimination.inverse(data, ops), ops.mode)

    def rank(self, tolerance: float = DEFAULT_TOLERANCE) -> int:
        """Number of pivots in a row-echelon reduction (exact in integer mode)."""
        data, ops = self._resolved()
        return _elimination.rank(data, ops, tolerance)

    # --- Structural predicates ---

    def is_zero_matrix(self) -> bool:
        return _properties.is_zero_matrix(*self._resolved())

    def is_square(self) -> bool:
        return self._rows == self._cols

    def is_row_matrix(self) -> bool:
        return self._rows == 1

    def is_column_matrix(self) -> bool:
        return self._cols == 1

    def is_identity(self) -> bool:
        return _properties.is_identity(*self._resolved())

    def is_diagonal(self) -> bool:
        return _properties.is_diagonal(*self._resolved())

    def is_scalar_matrix(self) -> bool:
        return _properties.is_scalar_matrix(*self._resolved())

    def is_symmetric(self) -> bool:
        return _properties.is_symmetric(*self._resolved())

    def is_hermitian(self) -> bool:
        return _properties.is_hermitian(*self._resolved())

    def is_upper_triangular(self) -> bool:
        return _properties.is_upper_triangular(*self._resolved())

    def is_lower_triangular(self) -> bool:
        return _properties.is_lower_triangular(*self._resolved())

    def is_orthogonal(self, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """
        A @ A^T == I (real) or A @ A^H == I (complex, i.e. unitary).

        Non-square matrices are never orthogonal.

        Raises:
            UnsupportedOperationError: In integer mode
        """
        mode = self.mode
        if not self.is_square():
            return False
        if mode is NumericMode.INTEGER:
            raise UnsupportedOperationError(
                "Orthogonality check is not supported in integer mode",
                operation='is_orthogonal',
                mode=mode,
            )
        other = self.conjugate_transpose() if mode is NumericMode.COMPLEX else self.transpose()
        product = self.multiply(other)
        return product.equals(Matrix.identity(self._rows, mode), tolerance)

    def type(self) -> str:
        """Structural label, e.g. 'Identity Matrix' or 'Square Matrix'."""
        return _properties.classify(self)

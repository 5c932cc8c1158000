"""
Row-reduction kernels: determinant, Gauss-Jordan inverse and rank.

Every function takes a grid (list of rows) whose entries are already in
the operation set's mode, copies it, and works on the copy; the caller's
grid is never modified. Pivoting picks the first entry in the column that
is not zero under the operation set's is_zero, not the largest one.

Failure modes:
    determinant  Division errors from the operation set propagate, so an
                 integer matrix can fail with NonExactDivisionError even
                 though its determinant exists.
    inverse      UnsupportedOperationError in integer mode (no rational
                 arithmetic), SingularMatrixError when a column has no pivot.
    rank         Never divides in integer mode (fraction-free elimination),
                 so it is exact there and tolerance-based elsewhere.
"""

from __future__ import annotations

from math import gcd

from pymatrix.core.compute.tolerances import DEFAULT_TOLERANCE
from pymatrix.core.exceptions import SingularMatrixError, UnsupportedOperationError
from pymatrix.numeric.modes import NumericMode
from pymatrix.numeric.ops import NumericOps

Grid = list[list]


def _copy(grid: Grid) -> Grid:
    return [list(row) for row in grid]


def _find_pivot(
    A: Grid,
    col: int,
    start: int,
    ops: NumericOps,
    tolerance: float = DEFAULT_TOLERANCE,
) -> int | None:
    """Index of the first row at or below start with a usable entry in col."""
    for r in range(start, len(A)):
        if not ops.is_zero(A[r][col], tolerance):
            return r
    return None


def determinant(grid: Grid, ops: NumericOps):
    """
    Determinant by Gaussian elimination with row swaps.

    Args:
        grid: Square grid of entries in ops.mode
        ops: Operation set for the grid's mode

    Returns:
        The determinant as an entry of ops.mode; ops.zero() when a column
        has no pivot.

    Raises:
        NonExactDivisionError: Integer mode hit a multiplier with a remainder
    """
    A = _copy(grid)
    n = len(A)
    det = ops.one()
    negate = False

    for i in range(n):
        pivot_row = _find_pivot(A, i, i, ops)
        if pivot_row is None:
            return ops.zero()
        if pivot_row != i:
            A[i], A[pivot_row] = A[pivot_row], A[i]
            negate = not negate

        pivot = A[i][i]
        det = ops.mul(det, pivot)

        for r in range(i + 1, n):
            if ops.is_zero(A[r][i]):
                continue
            mult = ops.div(A[r][i], pivot)
            for c in range(i, n):
                A[r][c] = ops.sub(A[r][c], ops.mul(mult, A[i][c]))

    return ops.neg(det) if negate else det


def inverse(grid: Grid, ops: NumericOps) -> Grid:
    """
    Inverse by Gauss-Jordan elimination on the augmented grid [A | I].

    Args:
        grid: Square grid of entries in ops.mode
        ops: Operation set for the grid's mode

    Returns:
        The inverse as a new grid of entries in ops.mode

    Raises:
        UnsupportedOperationError: In integer mode
        SingularMatrixError: If some column has no pivot
    """
    if ops.mode is NumericMode.INTEGER:
        raise UnsupportedOperationError(
            "Inverse is not supported in integer mode (results are generally "
            "not integers); convert the matrix to real mode first",
            operation='inverse',
            mode=ops.mode,
        )

    n = len(grid)
    aug = [
        list(row) + [ops.one() if j == i else ops.zero() for j in range(n)]
        for i, row in enumerate(grid)
    ]
    width = 2 * n

    for col in range(n):
        pivot_row = _find_pivot(aug, col, col, ops)
        if pivot_row is None:
            raise SingularMatrixError(
                f"Matrix is singular: no pivot in column {col}",
                matrix_name='A',
                rank=col,
                expected_rank=n,
            )
        if pivot_row != col:
            aug[col], aug[pivot_row] = aug[pivot_row], aug[col]

        pivot = aug[col][col]
        aug[col] = [ops.div(v, pivot) for v in aug[col]]

        for r in range(n):
            if r == col:
                continue
            factor = aug[r][col]
            if ops.is_zero(factor):
                continue
            for j in range(width):
                aug[r][j] = ops.sub(aug[r][j], ops.mul(factor, aug[col][j]))

    return [row[n:] for row in aug]


def _eliminate_scaled(A: Grid, target: int, pivot_row: int, col: int, ops: NumericOps) -> None:
    # A[target] -= (A[target][col] / pivot) * A[pivot_row], from col onward
    mult = ops.div(A[target][col], A[pivot_row][col])
    row, src = A[target], A[pivot_row]
    for c in range(col, len(row)):
        row[c] = ops.sub(row[c], ops.mul(mult, src[c]))


def _eliminate_fraction_free(A: Grid, target: int, pivot_row: int, col: int, ops: NumericOps) -> None:
    # A[target] = pivot * A[target] - A[target][col] * A[pivot_row], then
    # divided by the row's gcd to keep the integers small
    pivot = A[pivot_row][col]
    factor = A[target][col]
    src = A[pivot_row]
    row = [
        ops.sub(ops.mul(pivot, v), ops.mul(factor, s))
        for v, s in zip(A[target], src)
    ]
    g = gcd(*row)
    if g > 1:
        row = [v // g for v in row]
    A[target] = row


def rank(grid: Grid, ops: NumericOps, tolerance: float = DEFAULT_TOLERANCE) -> int:
    """
    Rank by reduction to row-echelon form.

    For each column, the first row at or below the current one whose entry
    is not zero (within tolerance) becomes the pivot; every row below it is
    cleared in that column, and the rank grows by one.

    Args:
        grid: Grid of entries in ops.mode (any shape)
        ops: Operation set for the grid's mode
        tolerance: Entries with magnitude below this count as zero
            (ignored in integer mode)

    Returns:
        Number of pivots found
    """
    A = _copy(grid)
    m = len(A)
    n_cols = len(A[0]) if A else 0
    eliminate = (
        _eliminate_fraction_free if ops.mode is NumericMode.INTEGER else _eliminate_scaled
    )

    result = 0
    for col in range(n_cols):
        if result == m:
            break
        sel = _find_pivot(A, col, result, ops, tolerance)
        if sel is None:
            continue
        A[result], A[sel] = A[sel], A[result]

        for r in range(result + 1, m):
            if not ops.is_zero(A[r][col], tolerance):
                eliminate(A, r, result, col, ops)
        result += 1

    return result

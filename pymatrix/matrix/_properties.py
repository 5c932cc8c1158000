"""
Structural predicates and the matrix type classifier.

The predicates are read-only scans over a grid using an operation set's
is_zero / eq / conjugate, so tolerances apply in the floating modes and
comparisons are exact in integer mode.
"""

from __future__ import annotations

from operator import methodcaller

from pymatrix.numeric.ops import NumericOps

Grid = list[list]

ZERO_MATRIX = "Zero Matrix"
IDENTITY_MATRIX = "Identity Matrix"
DIAGONAL_MATRIX = "Diagonal Matrix"
SCALAR_MATRIX = "Scalar Matrix"
HERMITIAN_MATRIX = "Hermitian Matrix"
SYMMETRIC_MATRIX = "Symmetric Matrix"
UPPER_TRIANGULAR_MATRIX = "Upper Triangular Matrix"
LOWER_TRIANGULAR_MATRIX = "Lower Triangular Matrix"
ROW_MATRIX = "Row Matrix"
COLUMN_MATRIX = "Column Matrix"
SQUARE_MATRIX = "Square Matrix"
RECTANGULAR_MATRIX = "Rectangular Matrix (General)"


def _is_square(grid: Grid) -> bool:
    return len(grid) == len(grid[0])


def is_zero_matrix(grid: Grid, ops: NumericOps) -> bool:
    return all(ops.is_zero(v) for row in grid for v in row)


def is_identity(grid: Grid, ops: NumericOps) -> bool:
    if not _is_square(grid):
        return False
    one = ops.one()
    for i, row in enumerate(grid):
        for j, v in enumerate(row):
            if i == j:
                if not ops.eq(v, one):
                    return False
            elif not ops.is_zero(v):
                return False
    return True


def is_diagonal(grid: Grid, ops: NumericOps) -> bool:
    if not _is_square(grid):
        return False
    return all(
        ops.is_zero(v)
        for i, row in enumerate(grid)
        for j, v in enumerate(row)
        if i != j
    )


def is_scalar_matrix(grid: Grid, ops: NumericOps) -> bool:
    """Diagonal with every diagonal entry equal (not necessarily one)."""
    if not is_diagonal(grid, ops):
        return False
    first = grid[0][0]
    return all(ops.eq(grid[i][i], first) for i in range(1, len(grid)))


def is_symmetric(grid: Grid, ops: NumericOps) -> bool:
    """A == A^T, without conjugation (see is_hermitian for complex)."""
    if not _is_square(grid):
        return False
    return all(
        ops.eq(grid[i][j], grid[j][i])
        for i in range(len(grid))
        for j in range(i)
    )


def is_hermitian(grid: Grid, ops: NumericOps) -> bool:
    """A == A^H. Diagonal entries must be real; reduces to symmetry outside complex mode."""
    if not _is_square(grid):
        return False
    n = len(grid)
    return all(
        ops.eq(grid[i][j], ops.conjugate(grid[j][i]))
        for i in range(n)
        for j in range(i + 1)
    )


def is_upper_triangular(grid: Grid, ops: NumericOps) -> bool:
    if not _is_square(grid):
        return False
    return all(ops.is_zero(grid[i][j]) for i in range(1, len(grid)) for j in range(i))


def is_lower_triangular(grid: Grid, ops: NumericOps) -> bool:
    if not _is_square(grid):
        return False
    n = len(grid)
    return all(ops.is_zero(grid[i][j]) for i in range(n) for j in range(i + 1, n))


# Order matters: the first predicate that holds names the matrix.
_CLASSIFICATION_CHAIN = (
    (ZERO_MATRIX, methodcaller('is_zero_matrix')),
    (IDENTITY_MATRIX, methodcaller('is_identity')),
    (DIAGONAL_MATRIX, methodcaller('is_diagonal')),
    (SCALAR_MATRIX, methodcaller('is_scalar_matrix')),
    (HERMITIAN_MATRIX, methodcaller('is_hermitian')),
    (SYMMETRIC_MATRIX, methodcaller('is_symmetric')),
    (UPPER_TRIANGULAR_MATRIX, methodcaller('is_upper_triangular')),
    (LOWER_TRIANGULAR_MATRIX, methodcaller('is_lower_triangular')),
    (ROW_MATRIX, methodcaller('is_row_matrix')),
    (COLUMN_MATRIX, methodcaller('is_column_matrix')),
    (SQUARE_MATRIX, methodcaller('is_square')),
)


def classify(matrix) -> str:
    """
    Human-readable type label for a Matrix.

    Runs the predicate chain ZeroMatrix, Identity, Diagonal, Scalar,
    Hermitian, Symmetric, Upper/Lower Triangular, Row, Column, Square and
    returns the first label whose predicate holds, falling back to
    RECTANGULAR_MATRIX.
    """
    for label, predicate in _CLASSIFICATION_CHAIN:
        if predicate(matrix):
            return label
    return RECTANGULAR_MATRIX

"""
One-call structural and numeric report for a Matrix.

summarize() gathers mode, type label, rank and determinant into a
Result[MatrixSummary], timing each step. An integer determinant that
needs a fractional multiplier is reported as a warning on the Result
instead of aborting the whole report.
"""

from __future__ import annotations

from dataclasses import dataclass

from pymatrix.core.compute.timing import timed
from pymatrix.core.compute.tolerances import DEFAULT_TOLERANCE
from pymatrix.core.exceptions import NonExactDivisionError, ValidationError
from pymatrix.core.result import Result
from pymatrix.core.validation import Entry
from pymatrix.matrix.dense import Matrix
from pymatrix.numeric.modes import NumericMode


@dataclass(frozen=True)
class MatrixSummary:
    """
    Parameter payload for a matrix summary.

    Attributes:
        shape: (rows, cols)
        mode: Resolved numeric mode
        label: Structural type label (Matrix.type())
        rank: Row-echelon rank
        determinant: Determinant, or None if the matrix is not square or
            the integer elimination needed a non-exact division
        singular: rank < n for square matrices, None otherwise
    """
    shape: tuple[int, int]
    mode: NumericMode
    label: str
    rank: int
    determinant: Entry | None
    singular: bool | None


def summarize(matrix: Matrix, *, tolerance: float = DEFAULT_TOLERANCE) -> Result[MatrixSummary]:
    """
    Summarize a matrix's structure and elimination results.

    Parameters
    ----------
    matrix : Matrix
        Matrix to inspect. It is not modified.
    tolerance : float
        Zero tolerance for the rank computation.

    Returns
    -------
    Result[MatrixSummary] with per-step timing.
    """
    if not isinstance(matrix, Matrix):
        raise ValidationError(f"matrix: expected Matrix, got {type(matrix).__name__}")

    warnings: list[str] = []
    determinant = None
    singular = None

    with timed() as timer:
        with timer.section('mode_detection'):
            mode = matrix.mode

        with timer.section('classification'):
            label = matrix.type()

        with timer.section('rank'):
            rank = matrix.rank(tolerance)

        if matrix.is_square():
            singular = rank < matrix.rows
            with timer.section('determinant'):
                try:
                    determinant = matrix.determinant()
                except NonExactDivisionError as e:
                    warnings.append(f"determinant unavailable: {e}")

    return Result(
        params=MatrixSummary(
            shape=matrix.shape,
            mode=mode,
            label=label,
            rank=rank,
            determinant=determinant,
            singular=singular,
        ),
        info={
            'method': 'gaussian_elimination',
            'mode': mode.value,
            'dimension': matrix.dimension(),
        },
        timing=timer.result(),
        warnings=tuple(warnings),
    )

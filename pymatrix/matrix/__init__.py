"""
Dense matrices over real, arbitrary-precision integer and complex entries.

Public API:
    Matrix          - Container with algebra, predicates and type()
    summarize(m)    - Mode, label, rank and determinant in one Result
    MatrixSummary   - Payload of summarize()
"""

from pymatrix.matrix.dense import Matrix
from pymatrix.matrix.summary import MatrixSummary, summarize

__all__ = [
    "Matrix",
    "MatrixSummary",
    "summarize",
]

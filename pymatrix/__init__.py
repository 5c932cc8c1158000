"""
PyMatrix: hybrid-numeric dense matrix algebra for Python.

Matrices whose entries are floats, arbitrary-precision ints or complex
numbers share one API; the numeric mode is detected from the entries and
mixed-mode operands are coerced to the wider mode.

Submodules:
    core: Exceptions, validation, result envelope, timing, tolerances
    numeric: Numeric modes, per-mode arithmetic, coercion
    matrix: The Matrix container and summaries
"""

__version__ = "0.1.0"

from pymatrix import core
from pymatrix import numeric
from pymatrix.matrix import Matrix, MatrixSummary, summarize
from pymatrix.numeric import NumericMode, coerce, ops_for

__all__ = [
    "__version__",
    "core",
    "numeric",
    "Matrix",
    "MatrixSummary",
    "summarize",
    "NumericMode",
    "coerce",
    "ops_for",
]

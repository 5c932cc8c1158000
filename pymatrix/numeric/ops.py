"""
Per-mode arithmetic primitives.

Each NumericMode has one stateless operation set supplying identities,
arithmetic, tolerance-aware comparisons, conjugation and display. The
elimination routines receive an operation set once per call and use it
for every entry, so they never branch on the mode themselves.

    ops = ops_for(NumericMode.INTEGER)
    ops.div(6, 3)      # 2
    ops.div(7, 2)      # NonExactDivisionError
"""

from __future__ import annotations

from functools import lru_cache

from pymatrix.core.compute.tolerances import DEFAULT_TOLERANCE
from pymatrix.core.exceptions import DivisionByZeroError, NonExactDivisionError
from pymatrix.numeric.coercion import coerce
from pymatrix.numeric.modes import NumericMode


def _format_real(x: float) -> str:
    """Decimal form without a trailing '.0' on integral values."""
    if x.is_integer():
        return str(int(x))
    return repr(x)


class NumericOps:
    """
    Arithmetic for one numeric mode.

    The base class implements the floating-point (REAL) behaviour;
    INTEGER and COMPLEX override what differs.
    """

    mode: NumericMode = NumericMode.REAL

    def zero(self):
        return 0.0

    def one(self):
        return 1.0

    def add(self, a, b):
        return a + b

    def sub(self, a, b):
        return a - b

    def mul(self, a, b):
        return a * b

    def neg(self, a):
        return -a

    def div(self, a, b):
        if b == 0:
            raise DivisionByZeroError(f"Division by zero ({self.mode.value} mode)")
        return a / b

    def eq(self, a, b, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        return abs(a - b) < tolerance

    def is_zero(self, a, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        return abs(a) < tolerance

    def conjugate(self, a):
        return a

    def to_display(self, a) -> str:
        return _format_real(a)

    def convert(self, value):
        """Coerce a value from any mode into this one."""
        return coerce(value, self.mode)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class RealOps(NumericOps):
    """Floating-point arithmetic with absolute-tolerance comparisons."""
    mode = NumericMode.REAL


class IntegerOps(NumericOps):
    """
    Exact arbitrary-precision integer arithmetic.

    Comparisons ignore the tolerance argument. Division only succeeds when
    the dividend is an exact multiple of the divisor.
    """
    mode = NumericMode.INTEGER

    def zero(self):
        return 0

    def one(self):
        return 1

    def div(self, a, b):
        if b == 0:
            raise DivisionByZeroError("Division by zero (integer mode)")
        if a % b != 0:
            raise NonExactDivisionError(
                f"Non-exact division {a} / {b} in integer mode",
                dividend=a,
                divisor=b,
            )
        return a // b

    def eq(self, a, b, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        return a == b

    def is_zero(self, a, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        return a == 0

    def to_display(self, a) -> str:
        return str(a)


class ComplexOps(NumericOps):
    """Complex arithmetic; comparisons apply the tolerance per component."""
    mode = NumericMode.COMPLEX

    def zero(self):
        return 0j

    def one(self):
        return 1 + 0j

    def eq(self, a, b, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        return abs(a.real - b.real) < tolerance and abs(a.imag - b.imag) < tolerance

    def is_zero(self, a, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        return abs(a.real) < tolerance and abs(a.imag) < tolerance

    def conjugate(self, a):
        return a.conjugate()

    def to_display(self, a) -> str:
        sign = '+' if a.imag >= 0 else '-'
        return f"{_format_real(a.real)}{sign}{_format_real(abs(a.imag))}i"


_OPS_CLASSES = {
    NumericMode.REAL: RealOps,
    NumericMode.INTEGER: IntegerOps,
    NumericMode.COMPLEX: ComplexOps,
}


@lru_cache(maxsize=None)
def ops_for(mode: NumericMode) -> NumericOps:
    """Shared operation set for a mode."""
    return _OPS_CLASSES[NumericMode(mode)]()

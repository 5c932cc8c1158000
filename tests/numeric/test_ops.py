"""
Tests for per-mode operation sets.
"""

import pytest

from pymatrix.core.exceptions import DivisionByZeroError, NonExactDivisionError
from pymatrix.numeric import ComplexOps, IntegerOps, NumericMode, RealOps, ops_for


class TestOpsFor:
    """ops_for returns one shared, mode-matched instance."""

    @pytest.mark.parametrize("mode,cls", [
        (NumericMode.REAL, RealOps),
        (NumericMode.INTEGER, IntegerOps),
        (NumericMode.COMPLEX, ComplexOps),
    ])
    def test_class_and_mode(self, mode, cls):
        ops = ops_for(mode)
        assert isinstance(ops, cls)
        assert ops.mode is mode

    def test_cached(self):
        assert ops_for(NumericMode.REAL) is ops_for(NumericMode.REAL)


class TestIdentities:

    def test_real(self):
        ops = ops_for(NumericMode.REAL)
        assert ops.zero() == 0.0 and type(ops.zero()) is float
        assert ops.one() == 1.0 and type(ops.one()) is float

    def test_integer(self):
        ops = ops_for(NumericMode.INTEGER)
        assert type(ops.zero()) is int
        assert ops.one() == 1

    def test_complex(self):
        ops = ops_for(NumericMode.COMPLEX)
        assert ops.zero() == 0j
        assert ops.one() == 1 + 0j
        assert type(ops.one()) is complex


class TestArithmetic:

    def test_complex_mul(self):
        ops = ops_for(NumericMode.COMPLEX)
        assert ops.mul(1 + 2j, 3 - 1j) == 5 + 5j

    def test_integer_exact_beyond_float(self):
        ops = ops_for(NumericMode.INTEGER)
        big = 2 ** 80
        assert ops.add(big, 1) - big == 1
        assert ops.mul(big, big) == 2 ** 160

    def test_neg(self):
        assert ops_for(NumericMode.REAL).neg(2.0) == -2.0
        assert ops_for(NumericMode.COMPLEX).neg(1 - 1j) == -1 + 1j


class TestDivision:
    """div refuses zero divisors and, in integer mode, remainders."""

    def test_real(self):
        assert ops_for(NumericMode.REAL).div(3.0, 2.0) == 1.5

    def test_complex(self):
        assert ops_for(NumericMode.COMPLEX).div(5 + 5j, 3 - 1j) == pytest.approx(1 + 2j)

    @pytest.mark.parametrize("mode", list(NumericMode))
    def test_by_zero(self, mode):
        ops = ops_for(mode)
        with pytest.raises(DivisionByZeroError):
            ops.div(ops.one(), ops.zero())

    def test_integer_exact(self):
        assert ops_for(NumericMode.INTEGER).div(-12, 4) == -3

    def test_integer_non_exact(self):
        with pytest.raises(NonExactDivisionError, match="7 / 2") as exc_info:
            ops_for(NumericMode.INTEGER).div(7, 2)
        assert exc_info.value.dividend == 7
        assert exc_info.value.divisor == 2


class TestComparisons:
    """Tolerances apply to real and complex, never to integer."""

    def test_real_within_tolerance(self):
        ops = ops_for(NumericMode.REAL)
        assert ops.eq(1.0, 1.0 + 1e-12)
        assert not ops.eq(1.0, 1.001)
        assert ops.eq(1.0, 1.001, tolerance=1e-2)

    def test_real_is_zero(self):
        ops = ops_for(NumericMode.REAL)
        assert ops.is_zero(1e-12)
        assert not ops.is_zero(1e-3)

    def test_complex_per_component(self):
        ops = ops_for(NumericMode.COMPLEX)
        assert ops.eq(1 + 1j, complex(1 + 1e-12, 1 - 1e-12))
        assert not ops.eq(1 + 1j, 1 + 1.1j)
        assert ops.is_zero(complex(1e-12, -1e-12))
        assert not ops.is_zero(1e-3j)

    def test_integer_exact(self):
        ops = ops_for(NumericMode.INTEGER)
        assert ops.eq(5, 5)
        assert not ops.eq(5, 6, tolerance=10)
        assert ops.is_zero(0)
        assert not ops.is_zero(1, tolerance=10)


class TestConjugateAndDisplay:

    def test_conjugate(self):
        assert ops_for(NumericMode.COMPLEX).conjugate(2 - 1j) == 2 + 1j
        assert ops_for(NumericMode.REAL).conjugate(2.5) == 2.5
        assert ops_for(NumericMode.INTEGER).conjugate(7) == 7

    @pytest.mark.parametrize("value,text", [
        (1 + 2j, "1+2i"),
        (2 - 1j, "2-1i"),
        (0.5 + 0j, "0.5+0i"),
        (complex(-1.5, -0.25), "-1.5-0.25i"),
    ])
    def test_complex_display(self, value, text):
        assert ops_for(NumericMode.COMPLEX).to_display(value) == text

    def test_real_display(self):
        ops = ops_for(NumericMode.REAL)
        assert ops.to_display(2.0) == "2"
        assert ops.to_display(-0.5) == "-0.5"

    def test_integer_display(self):
        assert ops_for(NumericMode.INTEGER).to_display(10 ** 20) == "100000000000000000000"

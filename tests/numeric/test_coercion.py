"""
Tests for coerce(): single-value conversion between modes.
"""

import warnings

import pytest

from pymatrix.core.exceptions import PrecisionLossWarning, UnsupportedCoercionError
from pymatrix.numeric import NumericMode, coerce


class TestIntoComplex:
    """Widening into complex is lossless."""

    @pytest.mark.parametrize("value,expected", [
        (2, 2 + 0j),
        (1.5, 1.5 + 0j),
        (1 - 2j, 1 - 2j),
    ])
    def test_widen(self, value, expected):
        result = coerce(value, NumericMode.COMPLEX)
        assert type(result) is complex
        assert result == expected

    def test_huge_int_refused(self):
        with pytest.raises(UnsupportedCoercionError, match="complex mode"):
            coerce(10 ** 400, NumericMode.COMPLEX)


class TestIntoInteger:
    """Real truncates toward zero; complex is refused."""

    def test_int_unchanged(self):
        big = 10 ** 30 + 7
        assert coerce(big, NumericMode.INTEGER) == big

    def test_integral_float_is_silent(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            result = coerce(4.0, NumericMode.INTEGER)
        assert result == 4
        assert type(result) is int

    @pytest.mark.parametrize("value,expected", [(2.7, 2), (-2.7, -2), (0.5, 0)])
    def test_truncates_toward_zero(self, value, expected):
        with pytest.warns(PrecisionLossWarning, match="Truncating"):
            assert coerce(value, NumericMode.INTEGER) == expected

    def test_complex_refused(self):
        with pytest.raises(UnsupportedCoercionError, match="integer mode") as exc_info:
            coerce(1 + 0j, NumericMode.INTEGER)
        assert exc_info.value.target_mode is NumericMode.INTEGER


class TestIntoReal:
    """Ints convert; complex only with an exactly zero imaginary part."""

    def test_int_to_float(self):
        result = coerce(3, NumericMode.REAL)
        assert result == 3.0
        assert type(result) is float

    def test_float_unchanged(self):
        assert coerce(2.5, NumericMode.REAL) == 2.5

    def test_complex_with_zero_imag(self):
        result = coerce(4 + 0j, NumericMode.REAL)
        assert result == 4.0
        assert type(result) is float

    def test_complex_with_tiny_imag_refused(self):
        """No tolerance: any non-zero imaginary part is refused."""
        with pytest.raises(UnsupportedCoercionError, match="imaginary"):
            coerce(complex(1, 1e-300), NumericMode.REAL)

    def test_huge_int_refused(self):
        with pytest.raises(UnsupportedCoercionError, match="out of range"):
            coerce(10 ** 400, NumericMode.REAL)

"""
Tests for numeric mode detection and precedence.
"""

import pytest

from pymatrix.numeric import NumericMode, classify_entry, combine_modes, detect_mode


class TestPrecedence:
    """COMPLEX > INTEGER > REAL."""

    def test_ordering(self):
        assert NumericMode.COMPLEX.precedence > NumericMode.INTEGER.precedence
        assert NumericMode.INTEGER.precedence > NumericMode.REAL.precedence

    @pytest.mark.parametrize("a,b,expected", [
        (NumericMode.REAL, NumericMode.REAL, NumericMode.REAL),
        (NumericMode.REAL, NumericMode.INTEGER, NumericMode.INTEGER),
        (NumericMode.INTEGER, NumericMode.COMPLEX, NumericMode.COMPLEX),
        (NumericMode.COMPLEX, NumericMode.REAL, NumericMode.COMPLEX),
    ])
    def test_combine_pairs(self, a, b, expected):
        assert combine_modes(a, b) is expected
        assert combine_modes(b, a) is expected

    def test_combine_nothing_is_real(self):
        assert combine_modes() is NumericMode.REAL

    def test_mode_from_string(self):
        assert NumericMode('complex') is NumericMode.COMPLEX


class TestClassifyEntry:

    def test_types(self):
        assert classify_entry(1.5) is NumericMode.REAL
        assert classify_entry(3) is NumericMode.INTEGER
        assert classify_entry(2j) is NumericMode.COMPLEX


class TestDetectMode:
    """Any complex wins, then any int, else real."""

    def test_all_real(self):
        assert detect_mode([[1.0, 2.0], [3.0, 4.0]]) is NumericMode.REAL

    def test_single_int_makes_integer(self):
        assert detect_mode([[1.0, 2.0], [3, 4.0]]) is NumericMode.INTEGER

    def test_single_complex_makes_complex(self):
        assert detect_mode([[1, 2.0], [3, 1j]]) is NumericMode.COMPLEX

    def test_complex_after_int(self):
        """Complex found late still overrides an earlier int."""
        assert detect_mode([[1, 2], [3, 4], [5, 6 + 0j]]) is NumericMode.COMPLEX

    def test_empty_grid_is_real(self):
        assert detect_mode([]) is NumericMode.REAL
        assert detect_mode([[]]) is NumericMode.REAL

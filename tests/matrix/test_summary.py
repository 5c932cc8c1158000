"""
Tests for summarize().
"""

import pytest

from pymatrix import Matrix, NumericMode, summarize
from pymatrix.core.exceptions import ValidationError


class TestSummarize:

    def test_real_square(self, real_2x2):
        result = summarize(real_2x2)
        s = result.params
        assert s.shape == (2, 2)
        assert s.mode is NumericMode.REAL
        assert s.label == "Square Matrix"
        assert s.rank == 2
        assert s.determinant == -2.0
        assert s.singular is False
        assert result.info['mode'] == "real"
        assert result.info['dimension'] == "2 x 2"
        assert result.warnings == ()

    def test_timing_sections(self, real_2x2):
        timing = summarize(real_2x2).timing
        assert {'total_seconds', 'mode_detection', 'classification', 'rank', 'determinant'} <= set(timing)

    def test_rectangular_has_no_determinant(self):
        result = summarize(Matrix.from_array([[1.0, 2.0, 3.0], [2.0, 4.0, 6.0]]))
        assert result.params.rank == 1
        assert result.params.determinant is None
        assert result.params.singular is None
        assert 'determinant' not in result.timing

    def test_singular(self):
        s = summarize(Matrix.from_array([[1.0, 2.0], [2.0, 4.0]])).params
        assert s.singular is True
        assert s.determinant == 0.0

    def test_integer_non_exact_recorded_as_warning(self):
        result = summarize(Matrix.from_array([[2, 1], [3, 4]]))
        assert result.params.determinant is None
        assert result.params.rank == 2
        assert result.params.singular is False
        assert result.has_warning("Non-exact division")
        assert result.info['mode'] == "integer"

    def test_complex(self, hermitian_2x2):
        s = summarize(hermitian_2x2).params
        assert s.mode is NumericMode.COMPLEX
        assert s.label == "Hermitian Matrix"
        assert s.determinant == pytest.approx(1 * 3 - (2 + 1j) * (2 - 1j))

    def test_rejects_non_matrix(self):
        with pytest.raises(ValidationError):
            summarize([[1.0]])

"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def real_2x2():
    """[[1, 2], [3, 4]] in real mode: det -2, invertible."""
    return Matrix.from_array([[1.0, 2.0], [3.0, 4.0]])


@pytest.fixture
def integer_2x2():
    """[[1, 2], [3, 4]] in integer mode."""
    return Matrix.from_array([[1, 2], [3, 4]])


@pytest.fixture
def hermitian_2x2():
    """Complex Hermitian matrix [[1, 2+i], [2-i, 3]]."""
    return Matrix.from_array([[1 + 0j, 2 + 1j], [2 - 1j, 3 + 0j]])


@pytest.fixture
def random_real_square(rng):
    """Well-conditioned random 5x5 real matrix (diagonally dominated)."""
    A = rng.standard_normal((5, 5)) + 5.0 * np.eye(5)
    return A


@pytest.fixture
def rank_deficient_data(rng):
    """6x5 real matrix of rank 2 built as a product of thin factors."""
    left = rng.standard_normal((6, 2))
    right = rng.standard_normal((2, 5))
    return left @ right

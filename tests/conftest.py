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
def basic_4x3():
    """4x3 matrix used throughout the basic operation tests."""
    return Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9], [10, 11, 12]])


@pytest.fixture
def singular_3x3():
    """Rank-2 square matrix, determinant exactly 0."""
    return Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]])


@pytest.fixture
def invertible_3x3():
    """Determinant 1, so its inverse is integer-valued and exact."""
    return Matrix([[7, 2, 1], [0, 3, -1], [-3, 4, -2]])


@pytest.fixture
def integer_matrix(rng):
    """Factory for integer-valued matrices; sums and integer scalings stay exact."""
    def make(m, n, low=-9, high=10):
        return Matrix(rng.integers(low, high, size=(m, n)))
    return make

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
def m23():
    """2x3 matrix holding 1..6 row-major."""
    return Matrix(2, 3, [1, 2, 3, 4, 5, 6])


@pytest.fixture
def random_matrix(rng):
    """Factory for random float32 matrices of a given shape."""
    def _make(rows, columns):
        values = rng.standard_normal(rows * columns).astype(np.float32)
        return Matrix(rows, columns, values)
    return _make

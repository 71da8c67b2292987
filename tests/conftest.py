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
def square():
    """2x2 matrix [1, 2; 3, 4]."""
    return Matrix.from_values(2, 2, [1, 2, 3, 4])


@pytest.fixture
def wide():
    """2x3 matrix [1, 2, 3; 4, 5, 6]."""
    return Matrix.from_values(2, 3, [1, 2, 3, 4, 5, 6])

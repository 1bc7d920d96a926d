"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pystaz.core.errors import clear_error


@pytest.fixture(autouse=True)
def _fresh_latch():
    """Each test starts with a cleared error latch."""
    clear_error()
    yield
    clear_error()


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def textbook_sample():
    """Population mean 5, variance 4, sd 2."""
    return np.array([2, 4, 4, 4, 5, 5, 7, 9], dtype=np.float64)


@pytest.fixture
def skewed_sample():
    """Small right-skewed sample with distinct mean (4) and median (3)."""
    return np.array([1, 2, 3, 4, 10], dtype=np.float64)

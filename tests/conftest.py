"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def scores():
    """Small sample with a unique mode and hand-checkable moments."""
    return np.array([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0])


@pytest.fixture
def normal_scores():
    """Expected normal order statistics: as normal as a sample can be."""
    from scipy.special import ndtri
    n = 50
    return ndtri((np.arange(1, n + 1) - 0.5) / n)


@pytest.fixture
def skewed_sample(rng):
    """Strongly right-skewed sample (exponential)."""
    return rng.exponential(scale=2.0, size=300)

"""Pytest configuration file with shared polynomial fixtures."""

import numpy as np
import pytest

from polykit import Polynomial

__all__ = ["quadratic", "quintic", "rng"]


@pytest.fixture
def rng():
    """Seeded random generator so tests are deterministic."""
    return np.random.default_rng(1234)


@pytest.fixture
def quadratic():
    """p(t) = t**2 - 4 t + 3, roots 1 and 3, vertex at t = 2."""
    return Polynomial([3.0, -4.0, 1.0])


@pytest.fixture
def quintic(rng):
    """A random quintic (N = 6) with coefficients in [-2, 2]."""
    return Polynomial(rng.uniform(-2.0, 2.0, size=6))

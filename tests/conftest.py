"""Shared fixtures for the TabKit test suite."""

import numpy as np
import pytest


def _quartic(x):
    """Test polynomial f(x) = x^4 - 2x^3 + x - 1."""
    x = np.asarray(x, dtype=float)
    return x**4 - 2 * x**3 + x - 1


def _quartic_derivative(x):
    """Exact derivative of the test polynomial."""
    x = np.asarray(x, dtype=float)
    return 4 * x**3 - 6 * x**2 + 1


@pytest.fixture
def quartic():
    """Returns the pair ``(f, f')`` for f(x) = x^4 - 2x^3 + x - 1."""
    return _quartic, _quartic_derivative


@pytest.fixture
def uniform_quartic_table():
    """Quartic sampled on a uniform grid of 9 nodes in [-1, 1]."""
    x = np.linspace(-1.0, 1.0, 9)
    return {"x": x, "f": _quartic(x)}


@pytest.fixture
def nonuniform_quartic_table():
    """Quartic sampled on a non-uniform grid of 7 nodes in [0, 2.5]."""
    x = np.array([0.0, 0.3, 0.7, 1.2, 1.6, 2.1, 2.5])
    return {"x": x, "f": _quartic(x)}

r"""Lagrange interpolation of tabulated functions.

The interpolating polynomial through all ``n`` nodes is evaluated directly
in Lagrange form,

.. math::

    P(X) = \sum_{i=0}^{n-1} f_i L_i(X), \qquad
    L_i(X) = \prod_{j \ne i} \frac{X - x_j}{x_i - x_j},

at a cost of :math:`O(n^2)` per evaluation point. Points outside the node
span are extrapolated.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from tabkit.results import InterpolationResult
from tabkit.utils.types import Table
from tabkit.utils.validate import validate_points_to_evaluate, validate_tabular

__all__ = [
    "interpolate_lagrange_at_point",
    "interpolate_lagrange",
    "interpolate_lagrange_raw",
]


def interpolate_lagrange_at_point(x: ArrayLike, f: ArrayLike, point: float) -> float:
    """Evaluates the Lagrange polynomial through ``(x, f)`` at one point.

    Args:
        x: Distinct node positions.
        f: Function values at the nodes.
        point: Evaluation point.

    Returns:
        The value of the interpolating polynomial at ``point``.
    """
    x = np.asarray(x, dtype=float)
    f = np.asarray(f, dtype=float)
    n = x.shape[0]
    indices = np.arange(n)

    value = 0.0
    for i in range(n):
        others = x[indices != i]
        basis = np.prod((point - others) / (x[i] - others))
        value += f[i] * basis
    return float(value)


def interpolate_lagrange(table: Table, X: ArrayLike) -> InterpolationResult:
    """Interpolates a tabulated function at every point of ``X``.

    Args:
        table: Tabulated function with at least two nodes.
        X: Evaluation points; extrapolation is allowed.

    Returns:
        An :class:`InterpolationResult` with ``F[k] = P(X[k])``.

    Raises:
        DataError: If the table or the points are invalid.
    """
    x, f = validate_tabular(table)
    points = validate_points_to_evaluate(table, X, require_in_range=False)

    values = np.array([interpolate_lagrange_at_point(x, f, p) for p in points])
    return InterpolationResult(X=points, F=values)


def interpolate_lagrange_raw(x: ArrayLike, f: ArrayLike, X: ArrayLike) -> np.ndarray:
    """Same as :func:`interpolate_lagrange` but takes and returns bare arrays."""
    return interpolate_lagrange({"x": x, "f": f}, X).F

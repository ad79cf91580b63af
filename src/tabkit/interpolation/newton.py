"""Newton divided-difference interpolation of tabulated functions.

Produces the same polynomial as :mod:`tabkit.interpolation.lagrange` on the
same nodes; it exists mainly as an independent cross-check.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from tabkit.results import InterpolationResult
from tabkit.utils.types import Table
from tabkit.utils.validate import validate_points_to_evaluate, validate_tabular

__all__ = [
    "build_newton_coefficients",
    "evaluate_newton_at_point",
    "interpolate_newton",
    "interpolate_newton_raw",
]


def build_newton_coefficients(x: ArrayLike, f: ArrayLike) -> NDArray[np.float64]:
    """Builds the divided-difference coefficients of the Newton polynomial.

    ``coef[k]`` is the divided difference ``f[x_0, ..., x_k]``. The table is
    updated in place, order by order, on a copy of ``f``.

    Args:
        x: Distinct node positions.
        f: Function values at the nodes. Not modified.

    Returns:
        Array of ``len(x)`` coefficients.
    """
    x = np.asarray(x, dtype=float)
    coef = np.array(f, dtype=float)
    n = x.shape[0]

    for j in range(1, n):
        # right-hand side is evaluated before assignment, so every entry uses order j-1 values
        coef[j:] = (coef[j:] - coef[j - 1:-1]) / (x[j:] - x[:-j])
    return coef


def evaluate_newton_at_point(x: ArrayLike, coef: ArrayLike, point: float) -> float:
    """Evaluates the Newton polynomial at ``point`` by nested multiplication.

    Args:
        x: Node positions used to build ``coef``.
        coef: Coefficients from :func:`build_newton_coefficients`.
        point: Evaluation point.

    Returns:
        The value of the polynomial at ``point``.
    """
    x = np.asarray(x, dtype=float)
    coef = np.asarray(coef, dtype=float)
    n = coef.shape[0]

    result = coef[n - 1]
    for i in range(n - 2, -1, -1):
        result = result * (point - x[i]) + coef[i]
    return float(result)


def interpolate_newton(table: Table, X: ArrayLike) -> InterpolationResult:
    """Interpolates a tabulated function at every point of ``X``.

    The coefficients are built once and reused for all points.

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

    coef = build_newton_coefficients(x, f)
    values = np.array([evaluate_newton_at_point(x, coef, p) for p in points])
    return InterpolationResult(X=points, F=values)


def interpolate_newton_raw(x: ArrayLike, f: ArrayLike, X: ArrayLike) -> np.ndarray:
    """Same as :func:`interpolate_newton` but takes and returns bare arrays."""
    return interpolate_newton({"x": x, "f": f}, X).F

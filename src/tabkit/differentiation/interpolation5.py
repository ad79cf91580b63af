"""First derivatives from local 5-node Lagrange polynomials.

For each evaluation point a window of five consecutive nodes is chosen (see
:func:`tabkit.utils.grid.get_5_point_stencil_indices`), the degree-4
Lagrange polynomial through those nodes is built, and its analytic derivative
is evaluated at the point. The grid does not need to be uniform, but the
points must lie inside the tabulated range.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from tabkit.config import STENCIL_SIZE
from tabkit.results import DerivativeResult
from tabkit.utils.grid import get_5_point_stencil_indices
from tabkit.utils.types import Table
from tabkit.utils.validate import (
    validate_min_points_for_method,
    validate_points_to_evaluate,
    validate_tabular,
)

__all__ = [
    "compute_lagrange_derivative_at_point",
    "differentiate_by_interpolation5",
    "differentiate_by_interpolation5_raw",
]

METHOD_NAME = "interpolation5"


def compute_lagrange_derivative_at_point(x: ArrayLike, f: ArrayLike, point: float) -> float:
    r"""Evaluates the derivative of the Lagrange polynomial through ``(x, f)``.

    Works for any number of distinct nodes. Applying the product rule to
    each basis polynomial gives

    .. math::

        L_i'(X) = \sum_{m \ne i} \frac{1}{x_i - x_m}
                  \prod_{j \ne i, m} \frac{X - x_j}{x_i - x_j},

    and the derivative is :math:`\sum_i f_i L_i'(X)`.

    Args:
        x: Distinct node positions.
        f: Function values at the nodes.
        point: Evaluation point.

    Returns:
        The derivative of the interpolating polynomial at ``point``.
    """
    x = np.asarray(x, dtype=float)
    f = np.asarray(f, dtype=float)
    n = x.shape[0]
    indices = np.arange(n)

    derivative = 0.0
    for i in range(n):
        basis_derivative = 0.0
        for m in range(n):
            if m == i:
                continue
            rest = x[(indices != i) & (indices != m)]
            term = np.prod((point - rest) / (x[i] - rest)) / (x[i] - x[m])
            basis_derivative += term
        derivative += f[i] * basis_derivative
    return float(derivative)


def differentiate_by_interpolation5(table: Table, X: ArrayLike) -> DerivativeResult:
    """Estimates the first derivative at each point of ``X`` from 5-node stencils.

    Args:
        table: Tabulated function with at least five nodes.
        X: Evaluation points, all within ``[min(x), max(x)]``.

    Returns:
        A :class:`DerivativeResult` with one derivative per point.

    Raises:
        DataError: If the table has fewer than five nodes, is otherwise
            invalid, or a point lies outside the tabulated range.
    """
    x, f = validate_tabular(table, min_points=STENCIL_SIZE)
    validate_min_points_for_method(table, STENCIL_SIZE, METHOD_NAME)
    points = validate_points_to_evaluate(table, X, require_in_range=True)

    nodes = {"x": x, "f": f}
    derivatives = np.empty(points.shape[0], dtype=float)
    for k, point in enumerate(points):
        idx = get_5_point_stencil_indices(nodes, point)
        derivatives[k] = compute_lagrange_derivative_at_point(x[idx], f[idx], point)

    return DerivativeResult(X=points, Fd=derivatives)


def differentiate_by_interpolation5_raw(x: ArrayLike, f: ArrayLike, X: ArrayLike) -> np.ndarray:
    """Same as :func:`differentiate_by_interpolation5` but on bare arrays."""
    return differentiate_by_interpolation5({"x": x, "f": f}, X).Fd

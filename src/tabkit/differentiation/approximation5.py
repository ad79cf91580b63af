"""First derivatives from 5-point finite-difference formulas.

Requires an (approximately) uniform grid, and evaluation points that sit on
tabulated nodes. At node ``i`` of an ``n``-node table the formula is chosen by
position, all of them fourth-order accurate in the step ``h``:

* ``i = 0``: forward, ``(-25 f0 + 48 f1 - 36 f2 + 16 f3 - 3 f4) / 12h``
* ``i = 1``: shifted forward, ``(-3 f0 - 10 f1 + 18 f2 - 6 f3 + f4) / 12h``
* ``2 <= i <= n - 3``: central, ``(f[i-2] - 8 f[i-1] + 8 f[i+1] - f[i+2]) / 12h``
* ``i = n - 2``: shifted backward (mirror of ``i = 1``)
* ``i = n - 1``: backward (mirror of ``i = 0``)
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from tabkit.config import NODE_TOLERANCE_FACTOR, STENCIL_SIZE, STEP_TOLERANCE
from tabkit.errors import DataError
from tabkit.logger import tabkit_logger
from tabkit.results import DerivativeResult
from tabkit.utils.grid import find_nearest_index, get_approximate_step
from tabkit.utils.types import Table
from tabkit.utils.validate import (
    validate_min_points_for_method,
    validate_points_to_evaluate,
    validate_tabular,
)

__all__ = [
    "finite_difference5_at_index",
    "differentiate_by_approximation5",
    "differentiate_by_approximation5_raw",
]

METHOD_NAME = "approximation5"

# Weights over five consecutive values, to be divided by 12 h.
_FORWARD = np.array([-25.0, 48.0, -36.0, 16.0, -3.0])
_SHIFTED_FORWARD = np.array([-3.0, -10.0, 18.0, -6.0, 1.0])
_CENTRAL = np.array([1.0, -8.0, 0.0, 8.0, -1.0])
_SHIFTED_BACKWARD = -_SHIFTED_FORWARD[::-1]
_BACKWARD = -_FORWARD[::-1]


def finite_difference5_at_index(f: ArrayLike, i: int, h: float) -> float:
    """Applies the 5-point first-derivative formula suited to node ``i``.

    Args:
        f: Function values on a uniform grid.
        i: Node index, ``0 <= i < len(f)``.
        h: Grid step.

    Returns:
        The derivative estimate at node ``i``.

    Raises:
        DataError: If fewer than five values are given or ``i`` is not a
            valid node index.
    """
    f = np.asarray(f, dtype=float)
    n = f.shape[0]
    if n < STENCIL_SIZE:
        raise DataError(
            "At least 5 points are required to apply 5-point finite difference formulas."
        )
    if not 0 <= i < n:
        raise DataError(f"Node index {i} is outside of [0, {n - 1}].")

    if i == 0:
        weights, window = _FORWARD, f[:5]
    elif i == 1:
        weights, window = _SHIFTED_FORWARD, f[:5]
    elif i <= n - 3:
        weights, window = _CENTRAL, f[i - 2:i + 3]
    elif i == n - 2:
        weights, window = _SHIFTED_BACKWARD, f[n - 5:]
    else:
        weights, window = _BACKWARD, f[n - 5:]

    return float(np.dot(weights, window) / (12.0 * h))


def differentiate_by_approximation5(
    table: Table,
    X: ArrayLike,
    *,
    step_tolerance: float = STEP_TOLERANCE,
    node_tolerance_factor: float = NODE_TOLERANCE_FACTOR,
) -> DerivativeResult:
    """Estimates the first derivative at tabulated nodes with 5-point formulas.

    Each point of ``X`` is matched to its nearest node and must lie within
    ``|h| * node_tolerance_factor`` of it.

    Args:
        table: Tabulated function with at least five nodes on a uniform grid.
        X: Evaluation points, each coinciding with a node.
        step_tolerance: Maximum deviation of a node spacing from the mean
            step for the grid to be accepted as uniform.
        node_tolerance_factor: Relative distance (in units of ``|h|``) within
            which a point is matched to a node.

    Returns:
        A :class:`DerivativeResult` with one derivative per point.

    Raises:
        DataError: If the table is invalid or has fewer than five nodes, the
            grid is not uniform, a point is out of range, or a point is not
            close to any node.
    """
    x, f = validate_tabular(table, min_points=STENCIL_SIZE)
    validate_min_points_for_method(table, STENCIL_SIZE, METHOD_NAME)

    h = get_approximate_step(x, step_tolerance)
    if h is None or not np.isfinite(h) or h == 0.0:
        raise DataError("Approximation method requires an almost uniform grid in x.")
    tabkit_logger.debug("Uniform grid detected with step h=%g.", h)

    points = validate_points_to_evaluate(table, X, require_in_range=True)

    node_tolerance = abs(h) * node_tolerance_factor
    derivatives = np.empty(points.shape[0], dtype=float)
    for k, point in enumerate(points):
        idx = find_nearest_index(x, point)
        if abs(point - x[idx]) > node_tolerance:
            raise DataError(
                "Approximation method supports only points X that are close to "
                f"tabular nodes. Point X = {point:g} is not close enough to any node "
                f"(nearest node x[{idx}] = {x[idx]:g})."
            )
        derivatives[k] = finite_difference5_at_index(f, idx, h)

    return DerivativeResult(X=points, Fd=derivatives)


def differentiate_by_approximation5_raw(x: ArrayLike, f: ArrayLike, X: ArrayLike) -> np.ndarray:
    """Same as :func:`differentiate_by_approximation5` but on bare arrays."""
    return differentiate_by_approximation5({"x": x, "f": f}, X).Fd

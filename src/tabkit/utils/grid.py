"""Grid helpers: nearest-node lookup, step detection and stencil selection."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from tabkit.config import STENCIL_SIZE, STEP_TOLERANCE
from tabkit.errors import DataError
from tabkit.logger import tabkit_logger
from tabkit.utils.types import Table
from tabkit.utils.validate import table_columns

__all__ = [
    "find_nearest_index",
    "get_approximate_step",
    "get_5_point_stencil_indices",
]


def find_nearest_index(x: ArrayLike, point: float) -> int:
    """Returns the index of the node closest to ``point``.

    Ties are resolved in favour of the lowest index.

    Args:
        x: Node positions.
        point: Query position.

    Returns:
        Index ``i`` minimising ``|x[i] - point|``.

    Raises:
        DataError: If ``x`` is empty.
    """
    nodes = np.asarray(x, dtype=float)
    if nodes.size == 0:
        raise DataError("Cannot find nearest index in an empty array.")
    # argmin returns the first occurrence of the minimum
    return int(np.argmin(np.abs(nodes - point)))


def get_approximate_step(x: ArrayLike, tolerance: float = STEP_TOLERANCE) -> float | None:
    """Estimates the step of an approximately uniform grid.

    The step ``h`` is the mean spacing between consecutive nodes. The grid is
    accepted as uniform only if every spacing deviates from ``h`` by at most
    ``tolerance``.

    Args:
        x: Node positions.
        tolerance: Maximum allowed deviation of a single spacing from ``h``.

    Returns:
        The mean step ``h``, or ``None`` if the grid is not uniform or has
        fewer than two nodes. ``None`` is not an error here; methods that need
        a uniform grid must reject it themselves.
    """
    nodes = np.asarray(x, dtype=float)
    if nodes.size < 2:
        return None

    steps = np.diff(nodes)
    h = float(np.mean(steps))
    if np.any(np.abs(steps - h) > tolerance):
        return None
    return h


def get_5_point_stencil_indices(table: Table, point: float) -> NDArray[np.intp]:
    """Selects five consecutive node indices around ``point``.

    The window is centred on the nearest node when possible. Near either end
    of the table it is shifted, never truncated: the start index is first
    clamped to 0 and then to ``len(x) - 5``.

    Args:
        table: Tabulated function.
        point: Evaluation point.

    Returns:
        Array of five increasing indices into the table.

    Raises:
        DataError: If the table has fewer than five nodes.
    """
    x = np.asarray(table_columns(table)[0], dtype=float)
    n = x.shape[0]
    if n < STENCIL_SIZE:
        raise DataError(
            f"At least {STENCIL_SIZE} points are required to build a {STENCIL_SIZE}-point stencil."
        )

    nearest = find_nearest_index(x, point)
    start = nearest - STENCIL_SIZE // 2
    if start < 0:
        start = 0
    if start + STENCIL_SIZE - 1 >= n:
        start = n - STENCIL_SIZE

    tabkit_logger.debug("Stencil for X=%g starts at node %d of %d.", point, start, n)
    return np.arange(start, start + STENCIL_SIZE)

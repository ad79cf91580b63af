"""Validation utilities for tabulated functions and evaluation points."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from tabkit.config import MIN_INTERPOLATION_POINTS
from tabkit.errors import DataError
from tabkit.utils.types import Table

__all__ = [
    "table_columns",
    "as_float_array",
    "is_strictly_increasing",
    "validate_tabular",
    "validate_points_to_evaluate",
    "validate_min_points_for_method",
]


def table_columns(table: Table) -> tuple[Any, Any]:
    """Extracts the raw ``x`` and ``f`` columns from a table-like object.

    Args:
        table: Object with ``x`` and ``f`` attributes, or a mapping with
            ``"x"`` and ``"f"`` keys.

    Returns:
        The ``(x, f)`` pair exactly as stored on ``table``.

    Raises:
        DataError: If ``table`` carries no ``x``/``f`` pair.
    """
    if isinstance(table, Mapping):
        if "x" in table and "f" in table:
            return table["x"], table["f"]
    elif hasattr(table, "x") and hasattr(table, "f"):
        return table.x, table.f
    raise DataError("Tabular data must contain arrays x and f.")


def as_float_array(values: Any, label: str) -> NDArray[np.float64]:
    """Copies numeric ``values`` into a fresh float array.

    Strings, ``None`` and other non-numeric entries are rejected rather than
    coerced, so ``"1.5"`` is not accepted as a number.

    Raises:
        DataError: If ``values`` is not made of numbers only.
    """
    try:
        raw = np.asarray(values)
    except (TypeError, ValueError):
        raise DataError(f"{label} must be a sequence of numbers.") from None
    if raw.dtype.kind not in "biuf":
        raise DataError(f"{label} must be a sequence of numbers.")
    return np.array(raw, dtype=float)


def _as_1d(values: Any, label: str) -> NDArray[np.float64]:
    """Copies ``values`` into a fresh 1D float array."""
    arr = as_float_array(values, label)
    if arr.ndim != 1:
        raise DataError(f"{label} must be a one-dimensional sequence.")
    return arr


def is_strictly_increasing(values: ArrayLike) -> bool:
    """Returns True if every element is larger than the one before it."""
    arr = np.asarray(values, dtype=float)
    return bool(np.all(np.diff(arr) > 0))


def validate_tabular(
    table: Table,
    min_points: int = MIN_INTERPOLATION_POINTS,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Validates a tabulated function and returns working copies of its columns.

    Requirements:
      - ``x`` and ``f`` are one-dimensional numeric sequences of equal length.
      - There are at least ``min_points`` nodes.
      - All nodes and values are finite.
      - ``x`` is strictly increasing.

    Args:
        table: Tabulated function (see :func:`table_columns`).
        min_points: Minimum number of nodes. Default is 2.

    Returns:
        Tuple ``(x, f)`` of new float64 arrays. The caller's data is never
        modified, so the arrays are safe to use as scratch space.

    Raises:
        DataError: On the first requirement that is violated.
    """
    x_raw, f_raw = table_columns(table)
    x = _as_1d(x_raw, "Tabular nodes x")
    f = _as_1d(f_raw, "Tabular values f")

    if x.shape[0] != f.shape[0]:
        raise DataError("Arrays x and f must have the same length.")
    if x.shape[0] < min_points:
        raise DataError(f"Tabular data must contain at least {min_points} points.")
    if not (np.all(np.isfinite(x)) and np.all(np.isfinite(f))):
        raise DataError("Tabular data contains invalid numeric values.")
    if not is_strictly_increasing(x):
        raise DataError("Array x must be strictly increasing.")

    return x, f


def validate_points_to_evaluate(
    table: Table,
    X: ArrayLike,
    require_in_range: bool = False,
) -> NDArray[np.float64]:
    """Validates the points at which a result is requested.

    Args:
        table: Tabulated function whose node span defines the allowed range.
        X: Evaluation points. Order and duplicates are preserved.
        require_in_range: If True, every point must lie in ``[min(x), max(x)]``.

    Returns:
        The points as a new float64 array.

    Raises:
        DataError: If ``X`` is empty, contains non-finite values, or (with
            ``require_in_range``) has a point outside the tabulated range.
    """
    points = as_float_array(X, "Points to evaluate (X)")
    if points.ndim != 1 or points.size == 0:
        raise DataError("Points to evaluate (X) must be a non-empty array.")
    if not np.all(np.isfinite(points)):
        raise DataError("Points to evaluate (X) contain invalid numeric values.")

    if require_in_range:
        x = np.asarray(table_columns(table)[0], dtype=float)
        min_x = float(np.min(x))
        max_x = float(np.max(x))
        for value in points:
            if value < min_x or value > max_x:
                raise DataError(
                    f"Point X = {value:g} is outside of the tabular data range "
                    f"[{min_x:g}, {max_x:g}]."
                )

    return points


def validate_min_points_for_method(
    table: Table,
    required_points: int,
    method_name: str,
) -> None:
    """Checks that a table has enough nodes for the named method.

    Raises:
        DataError: If the table has fewer than ``required_points`` nodes.
    """
    try:
        x = np.asarray(table_columns(table)[0])
    except (TypeError, ValueError):
        raise DataError("Tabular nodes x must be a sequence of numbers.") from None
    if x.ndim != 1:
        raise DataError("Tabular nodes x must be a one-dimensional sequence.")
    n = x.shape[0]
    if n < required_points:
        raise DataError(
            f'Method "{method_name}" requires at least {required_points} points '
            f"in the table; got {n}."
        )

"""Tabulated one-dimensional functions.

Provides :class:`TabularFunction`, a small read-only container for nodes
``x`` and values ``f`` with convenience methods that forward to the
interpolation and differentiation engines.

Two common entry points are:

* Direct construction with ``x`` and ``f`` sequences of equal length.
* :func:`tabular_from_table` for simple 2D tables holding x and f as rows
  or columns.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from tabkit.config import MIN_INTERPOLATION_POINTS
from tabkit.derivative_kit import differentiate
from tabkit.differentiation.summary import build_differentiation_methods_summary
from tabkit.errors import DataError
from tabkit.interpolation.summary import build_interpolation_methods_summary
from tabkit.interpolation_kit import interpolate
from tabkit.results import DerivativeResult, InterpolationResult, MethodsSummary
from tabkit.utils.validate import as_float_array, validate_tabular

__all__ = ["TabularFunction", "tabular_from_table", "parse_xf_table"]


def _frozen_copy(values: Any, label: str) -> NDArray[np.float64]:
    """Copies ``values`` into a float array that cannot be written to."""
    arr = as_float_array(values, label)
    arr.setflags(write=False)
    return arr


class TabularFunction:
    """A function known only at a set of nodes.

    The nodes and values are copied on construction and stored read-only,
    so neither the caller nor the engines can change them afterwards. The
    data are *not* validated here; every engine call validates them against
    its own requirements (e.g. five nodes for the derivative methods).

    Attributes:
        x: Tabulated nodes.
        f: Function values at the nodes.

    Example:
        >>> from tabkit.tabulated_model.one_d import TabularFunction
        >>> tab = TabularFunction([-1.0, 0.0, 2.0], [2.0, 3.0, 11.0])
        >>> tab.interpolate([0.0, 2.0], method="lagrange").F.tolist()
        [3.0, 11.0]
    """

    def __init__(self, x: ArrayLike, f: ArrayLike) -> None:
        """Initializes the tabulated function.

        Args:
            x: Nodes, expected strictly increasing.
            f: Function values, one per node.
        """
        self.x = _frozen_copy(x, "Tabular nodes x")
        self.f = _frozen_copy(f, "Tabular values f")

    def __len__(self) -> int:
        return int(self.x.shape[0]) if self.x.ndim == 1 else 0

    def __repr__(self) -> str:
        return f"TabularFunction(x={self.x.tolist()!r}, f={self.f.tolist()!r})"

    def validate(self, min_points: int = MIN_INTERPOLATION_POINTS) -> None:
        """Raises :class:`DataError` if the table is not well formed."""
        validate_tabular(self, min_points=min_points)

    def interpolate(self, X: ArrayLike, method: str = "lagrange") -> InterpolationResult:
        """Interpolates the function at ``X`` with the named method."""
        return interpolate(method, self, X)

    def differentiate(self, X: ArrayLike, method: str = "interpolation5") -> DerivativeResult:
        """Estimates the first derivative at ``X`` with the named method."""
        return differentiate(method, self, X)

    def summarize_interpolation(self, X: ArrayLike) -> MethodsSummary:
        """Compares Lagrange and Newton interpolation at ``X``."""
        return build_interpolation_methods_summary(self, X)

    def summarize_differentiation(self, X: ArrayLike) -> MethodsSummary:
        """Compares the two 5-point derivative methods at ``X``."""
        return build_differentiation_methods_summary(self, X)


def tabular_from_table(table: ArrayLike) -> TabularFunction:
    """Creates a :class:`TabularFunction` from a simple 2D ``(x, f)`` table.

    Supported layouts:
        * ``(2, N)``: row 0 = x, row 1 = f.
        * ``(N, 2)``: column 0 = x, column 1 = f.

    A ``(2, 2)`` table is read row-wise.

    Args:
        table: 2D array containing x and f.

    Returns:
        The tabulated function.
    """
    x, f = parse_xf_table(table)
    return TabularFunction(x, f)


def parse_xf_table(
    table: ArrayLike,
) -> tuple[NDArray[np.floating], NDArray[np.floating]]:
    """Splits a 2D table into ``(x, f)`` arrays.

    Args:
        table: 2D array in ``(2, N)`` or ``(N, 2)`` layout.

    Returns:
        A tuple ``(x, f)`` of 1D NumPy arrays.

    Raises:
        DataError: If the input does not match any of the supported layouts.
    """
    try:
        arr = np.asarray(table, dtype=float)
    except (TypeError, ValueError):
        raise DataError("table must be a 2D numeric array.") from None
    if arr.ndim != 2:
        raise DataError("table must be a 2D array.")

    match arr.shape:
        case (2, n) if n >= 1:
            # row 0 = x, row 1 = f
            x = arr[0, :]
            f = arr[1, :]
        case (n, 2) if n >= 1:
            # column 0 = x, column 1 = f
            x = arr[:, 0]
            f = arr[:, 1]
        case _:
            raise DataError(
                f"Unexpected table shape {arr.shape}; expected (2, N) or (N, 2)."
            )

    return x, f

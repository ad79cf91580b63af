"""Provides the interpolation front end.

Choose an interpolation backend by name and evaluate a tabulated function
at a set of points.

Examples:
    >>> from tabkit.interpolation_kit import interpolate
    >>> table = {"x": [-1.0, 0.0, 2.0], "f": [2.0, 3.0, 11.0]}
    >>> interpolate("newton", table, [0.5]).F.tolist()
    [4.25]

Notes:
    - Method names must match exactly; call ``available_methods()`` for the
      list of accepted names.
"""

from __future__ import annotations

from typing import Callable

from numpy.typing import ArrayLike

from tabkit.errors import MethodNotSupportedError
from tabkit.interpolation.lagrange import interpolate_lagrange
from tabkit.interpolation.newton import interpolate_newton
from tabkit.results import InterpolationResult
from tabkit.utils.types import Table

__all__ = ["interpolate", "interpolate_raw", "available_methods"]

InterpolationEngine = Callable[[Table, ArrayLike], InterpolationResult]

# Built-in interpolation methods.
_METHODS: dict[str, InterpolationEngine] = {
    "lagrange": interpolate_lagrange,
    "newton": interpolate_newton,
}


def _resolve(method: str) -> InterpolationEngine:
    """Looks up the engine registered under ``method``.

    Raises:
        MethodNotSupportedError: If ``method`` is not a known method name.
    """
    try:
        return _METHODS[method]
    except (KeyError, TypeError):
        opts = ", ".join(available_methods())
        raise MethodNotSupportedError(
            f'Interpolation method "{method}" is not supported. Choose one of {{{opts}}}.'
        ) from None


def interpolate(method: str, table: Table, X: ArrayLike) -> InterpolationResult:
    """Interpolates a tabulated function at the points ``X``.

    Args:
        method: ``"lagrange"`` or ``"newton"``.
        table: Tabulated function with at least two nodes.
        X: Evaluation points; points outside the node span are extrapolated.

    Returns:
        An :class:`InterpolationResult` with ``F[k]`` the value at ``X[k]``.

    Raises:
        MethodNotSupportedError: If ``method`` is not recognised.
        DataError: If the table or the points are invalid.
    """
    engine = _resolve(method)
    return engine(table, X)


def interpolate_raw(method: str, x: ArrayLike, f: ArrayLike, X: ArrayLike):
    """Interpolates bare ``(x, f)`` arrays and returns only the values ``F``."""
    return interpolate(method, {"x": x, "f": f}, X).F


def available_methods() -> list[str]:
    """Lists the interpolation method names accepted by :func:`interpolate`."""
    return list(_METHODS)

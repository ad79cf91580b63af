"""Provides the differentiation front end.

Choose one of the 5-point derivative estimators by name and evaluate the
first derivative of a tabulated function at a set of points.

Examples:
    >>> import numpy as np
    >>> from tabkit.derivative_kit import differentiate
    >>> x = np.linspace(0.0, 1.0, 6)
    >>> result = differentiate("approximation5", {"x": x, "f": x**2}, [0.4])
    >>> np.allclose(result.Fd, [0.8])
    True

Notes:
    - ``"interpolation5"`` works on any strictly increasing grid and at any
      point inside the tabulated range.
    - ``"approximation5"`` needs a uniform grid and points on the nodes.
"""

from __future__ import annotations

from typing import Callable

from numpy.typing import ArrayLike

from tabkit.differentiation.approximation5 import differentiate_by_approximation5
from tabkit.differentiation.interpolation5 import differentiate_by_interpolation5
from tabkit.errors import MethodNotSupportedError
from tabkit.results import DerivativeResult
from tabkit.utils.types import Table

__all__ = ["differentiate", "differentiate_raw", "available_methods"]

DerivativeEngine = Callable[[Table, ArrayLike], DerivativeResult]

# Built-in differentiation methods.
_METHODS: dict[str, DerivativeEngine] = {
    "interpolation5": differentiate_by_interpolation5,
    "approximation5": differentiate_by_approximation5,
}


def _resolve(method: str) -> DerivativeEngine:
    """Looks up the engine registered under ``method``.

    Raises:
        MethodNotSupportedError: If ``method`` is not a known method name.
    """
    try:
        return _METHODS[method]
    except (KeyError, TypeError):
        opts = ", ".join(available_methods())
        raise MethodNotSupportedError(
            f'Differentiation method "{method}" is not supported. Choose one of {{{opts}}}.'
        ) from None


def differentiate(method: str, table: Table, X: ArrayLike) -> DerivativeResult:
    """Estimates the first derivative of a tabulated function at the points ``X``.

    Args:
        method: ``"interpolation5"`` or ``"approximation5"``.
        table: Tabulated function with at least five nodes.
        X: Evaluation points inside the tabulated range.

    Returns:
        A :class:`DerivativeResult` with ``Fd[k]`` the derivative at ``X[k]``.

    Raises:
        MethodNotSupportedError: If ``method`` is not recognised.
        DataError: If the input does not meet the method's requirements.
    """
    engine = _resolve(method)
    return engine(table, X)


def differentiate_raw(method: str, x: ArrayLike, f: ArrayLike, X: ArrayLike):
    """Differentiates bare ``(x, f)`` arrays and returns only the values ``Fd``."""
    return differentiate(method, {"x": x, "f": f}, X).Fd


def available_methods() -> list[str]:
    """Lists the differentiation method names accepted by :func:`differentiate`."""
    return list(_METHODS)

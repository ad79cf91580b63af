"""Side-by-side comparison of the two 5-point differentiation methods."""

from __future__ import annotations

from typing import Callable

import numpy as np
from numpy.typing import ArrayLike

from tabkit.differentiation.approximation5 import differentiate_by_approximation5
from tabkit.differentiation.interpolation5 import differentiate_by_interpolation5
from tabkit.errors import TabKitError
from tabkit.logger import tabkit_logger
from tabkit.results import (
    DerivativeResult,
    DifferentiationComparisonRow,
    MethodOutcome,
    MethodsSummary,
    abs_diff_stats,
)
from tabkit.utils.types import Table

__all__ = ["build_differentiation_methods_summary"]


def _capture(
    method: str,
    engine: Callable[[Table, ArrayLike], DerivativeResult],
    table: Table,
    X: ArrayLike,
) -> MethodOutcome:
    """Runs one method and records either its values or the error it raised."""
    try:
        result = engine(table, X)
    except TabKitError as exc:
        tabkit_logger.warning("Method %s is unavailable for this input: %s", method, exc)
        return MethodOutcome(method, error=exc)
    return MethodOutcome(method, values=result.Fd)


def _point_labels(X: ArrayLike) -> list[float]:
    """Returns the evaluation points as floats for the comparison rows."""
    try:
        points = np.array(X, dtype=float)
    except (TypeError, ValueError):
        return []
    if points.ndim != 1:
        return []
    return [float(p) for p in points]


def build_differentiation_methods_summary(
    table: Table,
    X: ArrayLike,
) -> MethodsSummary[DifferentiationComparisonRow]:
    """Differentiates with both 5-point methods and compares them point by point.

    The methods are attempted independently: if one of them cannot be applied
    (for example ``approximation5`` on a non-uniform grid) its column is
    ``None`` for every row while the other column is still filled in.

    Args:
        table: Tabulated function.
        X: Evaluation points.

    Returns:
        A :class:`MethodsSummary`. ``abs_diff`` and the aggregates are computed
        only over rows where both methods produced a value; the aggregates are
        ``None`` if there is no such row.
    """
    interpolation = _capture("interpolation5", differentiate_by_interpolation5, table, X)
    approximation = _capture("approximation5", differentiate_by_approximation5, table, X)

    rows: list[DifferentiationComparisonRow] = []
    diffs: list[float] = []
    for k, point in enumerate(_point_labels(X)):
        v_interp = interpolation.value_at(k)
        v_approx = approximation.value_at(k)

        abs_diff = None
        if v_interp is not None and v_approx is not None:
            abs_diff = abs(v_interp - v_approx)
            diffs.append(abs_diff)

        rows.append(
            DifferentiationComparisonRow(
                X=point,
                interpolation5=v_interp,
                approximation5=v_approx,
                abs_diff=abs_diff,
            )
        )

    mean_abs_diff = max_abs_diff = None
    if diffs:
        mean_abs_diff, max_abs_diff = abs_diff_stats(diffs)

    return MethodsSummary(
        rows=rows,
        mean_abs_diff=mean_abs_diff,
        max_abs_diff=max_abs_diff,
        outcomes=(interpolation, approximation),
    )

"""Side-by-side comparison of Lagrange and Newton interpolation."""

from __future__ import annotations

from numpy.typing import ArrayLike

from tabkit.interpolation.lagrange import interpolate_lagrange
from tabkit.interpolation.newton import interpolate_newton
from tabkit.results import (
    InterpolationComparisonRow,
    MethodOutcome,
    MethodsSummary,
    abs_diff_stats,
)
from tabkit.utils.types import Table

__all__ = ["build_interpolation_methods_summary"]


def build_interpolation_methods_summary(
    table: Table,
    X: ArrayLike,
) -> MethodsSummary[InterpolationComparisonRow]:
    """Interpolates with both methods and compares them point by point.

    Both methods accept the same inputs, so a failure of either one is a
    failure of the input and is raised to the caller.

    Args:
        table: Tabulated function with at least two nodes.
        X: Non-empty evaluation points.

    Returns:
        A :class:`MethodsSummary` with one row per point and the mean and
        maximum of ``|lagrange - newton|``.

    Raises:
        DataError: If the table or the points are invalid.
    """
    lagrange = interpolate_lagrange(table, X)
    newton = interpolate_newton(table, X)

    rows = [
        InterpolationComparisonRow(
            X=float(point),
            lagrange=float(v_l),
            newton=float(v_n),
            abs_diff=abs(float(v_l) - float(v_n)),
        )
        for point, v_l, v_n in zip(lagrange.X, lagrange.F, newton.F)
    ]

    if rows:
        mean_abs_diff, max_abs_diff = abs_diff_stats([row.abs_diff for row in rows])
    else:
        # no points contribute no disagreement
        mean_abs_diff, max_abs_diff = 0.0, 0.0

    return MethodsSummary(
        rows=rows,
        mean_abs_diff=mean_abs_diff,
        max_abs_diff=max_abs_diff,
        outcomes=(
            MethodOutcome("lagrange", values=lagrange.F),
            MethodOutcome("newton", values=newton.F),
        ),
    )

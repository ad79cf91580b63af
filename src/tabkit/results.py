"""Result containers returned by the TabKit engines and summary builders.

Values that a method could not produce are ``None``; they are never
replaced by ``0.0`` or NaN, so presentation code can tell "not computed"
apart from "computed as zero".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

import numpy as np

from tabkit.utils.types import FloatArray

__all__ = [
    "InterpolationResult",
    "DerivativeResult",
    "MethodOutcome",
    "InterpolationComparisonRow",
    "DifferentiationComparisonRow",
    "MethodsSummary",
]


@dataclass(frozen=True, eq=False)
class InterpolationResult:
    """Interpolated values ``F[k]`` at the evaluation points ``X[k]``."""

    X: FloatArray
    F: FloatArray

    def to_dict(self) -> dict[str, list[float]]:
        """Returns the result as plain Python lists."""
        return {"X": self.X.tolist(), "F": self.F.tolist()}


@dataclass(frozen=True, eq=False)
class DerivativeResult:
    """Derivative estimates ``Fd[k]`` at the evaluation points ``X[k]``."""

    X: FloatArray
    Fd: FloatArray

    def to_dict(self) -> dict[str, list[float]]:
        """Returns the result as plain Python lists."""
        return {"X": self.X.tolist(), "Fd": self.Fd.tolist()}


@dataclass(frozen=True, eq=False)
class MethodOutcome:
    """Captured outcome of one branch of a method comparison.

    Exactly one of ``values`` and ``error`` is set: ``values`` holds the
    per-point results of a successful run, ``error`` the exception that
    stopped the method.
    """

    method: str
    values: Optional[FloatArray] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        """True if the method produced values."""
        return self.values is not None

    def value_at(self, k: int) -> Optional[float]:
        """Returns the ``k``-th value, or ``None`` if the method failed."""
        if self.values is None:
            return None
        return float(self.values[k])


@dataclass(frozen=True)
class InterpolationComparisonRow:
    """Lagrange and Newton values at one point and their absolute difference."""

    X: float
    lagrange: float
    newton: float
    abs_diff: float


@dataclass(frozen=True)
class DifferentiationComparisonRow:
    """Derivative estimates of both 5-point methods at one point.

    A method that could not be applied contributes ``None``; ``abs_diff`` is
    only set when both estimates are present.
    """

    X: float
    interpolation5: Optional[float]
    approximation5: Optional[float]
    abs_diff: Optional[float]


RowT = TypeVar("RowT", InterpolationComparisonRow, DifferentiationComparisonRow)


@dataclass(frozen=True)
class MethodsSummary(Generic[RowT]):
    """Row-wise comparison of two methods plus aggregate statistics.

    Attributes:
        rows: One row per evaluation point, in input order.
        mean_abs_diff: Mean of ``abs_diff`` over rows where both methods
            produced a value, or ``None`` if there is no such row.
        max_abs_diff: Maximum of ``abs_diff`` over the same rows, or ``None``.
        outcomes: The captured per-method outcomes the rows were built from.
    """

    rows: list[RowT]
    mean_abs_diff: Optional[float]
    max_abs_diff: Optional[float]
    outcomes: tuple[MethodOutcome, ...] = field(default=(), compare=False)

    def to_dict(self) -> dict[str, Any]:
        """Returns the summary as plain Python structures, keeping ``None``."""
        return {
            "rows": [vars(row).copy() for row in self.rows],
            "meanAbsDiff": self.mean_abs_diff,
            "maxAbsDiff": self.max_abs_diff,
        }


def abs_diff_stats(diffs: list[float]) -> tuple[float, float]:
    """Returns ``(mean, max)`` of a non-empty list of absolute differences."""
    arr = np.asarray(diffs, dtype=float)
    return float(np.mean(arr)), float(np.max(arr))

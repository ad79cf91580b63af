"""Polynomial interpolation through all tabulated nodes."""

from .lagrange import interpolate_lagrange, interpolate_lagrange_at_point
from .newton import (
    build_newton_coefficients,
    evaluate_newton_at_point,
    interpolate_newton,
)
from .summary import build_interpolation_methods_summary

__all__ = [
    "interpolate_lagrange",
    "interpolate_lagrange_at_point",
    "interpolate_newton",
    "build_newton_coefficients",
    "evaluate_newton_at_point",
    "build_interpolation_methods_summary",
]

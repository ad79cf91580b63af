"""First-derivative estimators on 5-node stencils."""

from .approximation5 import differentiate_by_approximation5, finite_difference5_at_index
from .interpolation5 import (
    compute_lagrange_derivative_at_point,
    differentiate_by_interpolation5,
)
from .summary import build_differentiation_methods_summary

__all__ = [
    "differentiate_by_interpolation5",
    "differentiate_by_approximation5",
    "compute_lagrange_derivative_at_point",
    "finite_difference5_at_index",
    "build_differentiation_methods_summary",
]

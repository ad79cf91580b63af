"""Utility functions for TabKit package."""

from .grid import (
    find_nearest_index,
    get_5_point_stencil_indices,
    get_approximate_step,
)
from .validate import (
    validate_min_points_for_method,
    validate_points_to_evaluate,
    validate_tabular,
)

__all__ = [
    "find_nearest_index",
    "get_approximate_step",
    "get_5_point_stencil_indices",
    "validate_tabular",
    "validate_points_to_evaluate",
    "validate_min_points_for_method",
]

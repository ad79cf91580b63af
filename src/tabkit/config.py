"""Numerical constants shared by the TabKit engines."""

from __future__ import annotations

__all__ = [
    "STENCIL_SIZE",
    "MIN_INTERPOLATION_POINTS",
    "STEP_TOLERANCE",
    "NODE_TOLERANCE_FACTOR",
]

#: Number of nodes used by both 5-point differentiation methods.
STENCIL_SIZE = 5
#: Minimum number of nodes for Lagrange and Newton interpolation.
MIN_INTERPOLATION_POINTS = 2
#: Maximum deviation of any node spacing from the mean step for a grid to count as uniform.
STEP_TOLERANCE = 1e-6
#: Evaluation points must lie within ``|h| * NODE_TOLERANCE_FACTOR`` of a node
#: for the finite-difference formulas to apply.
NODE_TOLERANCE_FACTOR = 1e-3

"""Exception types raised by TabKit."""

from __future__ import annotations

__all__ = ["TabKitError", "DataError", "MethodNotSupportedError"]


class TabKitError(ValueError):
    """Base class for all errors raised by TabKit."""


class DataError(TabKitError):
    """Raised for malformed, insufficient or out-of-range tabular input.

    Covers non-finite values, non-increasing nodes, length mismatches,
    too few nodes, evaluation points outside the node range, non-uniform
    grids and evaluation points that do not coincide with a node.
    """


class MethodNotSupportedError(TabKitError):
    """Raised when a dispatcher receives an unknown method name."""

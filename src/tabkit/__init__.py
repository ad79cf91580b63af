"""Provides all tabkit methods."""

from importlib.metadata import PackageNotFoundError, version

from tabkit.derivative_kit import differentiate
from tabkit.differentiation.summary import build_differentiation_methods_summary
from tabkit.errors import DataError, MethodNotSupportedError, TabKitError
from tabkit.interpolation.summary import build_interpolation_methods_summary
from tabkit.interpolation_kit import interpolate
from tabkit.results import (
    DerivativeResult,
    DifferentiationComparisonRow,
    InterpolationComparisonRow,
    InterpolationResult,
    MethodsSummary,
)
from tabkit.tabulated_model.one_d import TabularFunction, tabular_from_table
from tabkit.tabulated_model.parsing import load_tabular_file, parse_tabular_text

try:
    __version__ = version("tabkit")
except PackageNotFoundError:
    pass

__all__ = [
    "interpolate",
    "differentiate",
    "build_interpolation_methods_summary",
    "build_differentiation_methods_summary",
    "TabularFunction",
    "tabular_from_table",
    "parse_tabular_text",
    "load_tabular_file",
    "InterpolationResult",
    "DerivativeResult",
    "InterpolationComparisonRow",
    "DifferentiationComparisonRow",
    "MethodsSummary",
    "DataError",
    "MethodNotSupportedError",
    "TabKitError",
]

"""Tabulated function container and text ingestion."""

from .one_d import TabularFunction, tabular_from_table
from .parsing import ParsedTabularFile, load_tabular_file, parse_tabular_text

__all__ = [
    "TabularFunction",
    "tabular_from_table",
    "ParsedTabularFile",
    "parse_tabular_text",
    "load_tabular_file",
]

"""Parsing of tabulated functions from plain text.

The text format has one labelled row per quantity, in any order::

    x 0,43 0,48 0,52 0,57 0,62 0,67 0,72
    f 1,63597 1,76827 1,87357 2,03069 2,19759 2,37528 2,56453
    X 0,702 0,741 0,782 0,812

Tokens are separated by whitespace only, so either ``.`` or ``,`` may be used
as the decimal separator. The ``x`` and ``f`` rows are required; a missing
``X`` row yields an empty set of evaluation points.
"""

from __future__ import annotations

import math
import os
import re
from dataclasses import dataclass

import numpy as np

from tabkit.errors import DataError
from tabkit.tabulated_model.one_d import TabularFunction
from tabkit.utils.types import FloatArray

__all__ = [
    "ParsedTabularFile",
    "parse_number_token",
    "parse_labeled_row",
    "parse_tabular_text",
    "load_tabular_file",
]

_LABELS = {"x": "x", "X": "X", "f": "f", "fx": "f", "Fx": "f"}


@dataclass(frozen=True)
class ParsedTabularFile:
    """A tabulated function together with the points to evaluate it at."""

    table: TabularFunction
    X: FloatArray


def parse_number_token(token: str) -> float:
    """Parses one numeric token, accepting ``,`` as the decimal separator.

    Args:
        token: Text such as ``"0.43"`` or ``"0,43"``.

    Returns:
        The parsed value.

    Raises:
        DataError: If the token is empty, not a number, or not finite.
    """
    trimmed = token.strip()
    if not trimmed:
        raise DataError("Empty numeric token.")

    normalized = trimmed.replace(",", ".", 1)
    try:
        value = float(normalized)
    except ValueError:
        raise DataError(f'Cannot parse numeric value "{token}".') from None
    if not math.isfinite(value):
        raise DataError(f'Cannot parse numeric value "{token}".')
    return value


def _detect_row_label(raw_label: str) -> str:
    """Maps a row label such as ``"x:"`` or ``"f(x)"`` to ``"x"``, ``"f"`` or ``"X"``."""
    letters_only = re.sub(r"[^A-Za-z]", "", raw_label.strip())
    try:
        return _LABELS[letters_only]
    except KeyError:
        raise DataError(f'Unknown row label "{raw_label}". Expected x, f or X.') from None


def parse_labeled_row(line: str) -> tuple[str, list[float]]:
    """Parses a row made of a label followed by numbers.

    Args:
        line: One line of the input text.

    Returns:
        Tuple ``(label, values)`` where ``label`` is ``"x"``, ``"f"`` or ``"X"``.

    Raises:
        DataError: If the line is empty, has no values, or has an unknown label.
    """
    tokens = line.split()
    if not tokens:
        raise DataError("Cannot parse an empty line.")
    if len(tokens) < 2:
        raise DataError(
            f'Line "{line}" must contain a label and at least one numeric value.'
        )

    raw_label, *raw_values = tokens
    label = _detect_row_label(raw_label)
    values = [parse_number_token(token) for token in raw_values]
    return label, values


def parse_tabular_text(content: str) -> ParsedTabularFile:
    """Parses the labelled-row text format into a table and evaluation points.

    Blank lines are skipped. Each label may appear at most once.

    Args:
        content: The full text.

    Returns:
        A :class:`ParsedTabularFile`. ``X`` is empty when the text has no
        ``X`` row.

    Raises:
        DataError: On unknown labels, duplicated rows, unparsable numbers,
            or when the ``x`` or ``f`` row is missing.
    """
    if not isinstance(content, str):
        raise DataError("File content must be a string.")

    rows: dict[str, list[float]] = {}
    for raw_line in content.splitlines():
        if not raw_line.strip():
            continue
        label, values = parse_labeled_row(raw_line)
        if label in rows:
            raise DataError(f"Duplicate {label} row in file.")
        rows[label] = values

    if "x" not in rows or "f" not in rows:
        raise DataError("File must contain both x and f rows.")

    return ParsedTabularFile(
        table=TabularFunction(rows["x"], rows["f"]),
        X=np.array(rows.get("X", []), dtype=float),
    )


def load_tabular_file(path: str | os.PathLike[str]) -> ParsedTabularFile:
    """Reads a UTF-8 text file and parses it with :func:`parse_tabular_text`."""
    with open(path, encoding="utf-8") as fh:
        return parse_tabular_text(fh.read())

"""Unit tests for tabkit.tabulated_model.parsing."""

import numpy as np
import pytest

from tabkit.errors import DataError
from tabkit.tabulated_model.parsing import (
    load_tabular_file,
    parse_labeled_row,
    parse_number_token,
    parse_tabular_text,
)

SAMPLE = """
x 0,43 0,48 0,52 0,57 0,62 0,67 0,72
f 1,63597 1,76827 1,87357 2,03069 2,19759 2,37528 2,56453

X 0,702 0,741 0,782 0,812
"""


@pytest.mark.parametrize(
    "token, expected",
    [("0.43", 0.43), ("0,43", 0.43), ("  -2 ", -2.0), ("1e-3", 1e-3), ("7", 7.0)],
)
def test_parse_number_token(token, expected):
    """Tests that both decimal separators are accepted."""
    assert parse_number_token(token) == pytest.approx(expected)


@pytest.mark.parametrize("token", ["", "   ", "abc", "1,2,3", "inf", "nan"])
def test_parse_number_token_rejects_bad_tokens(token):
    """Tests that empty, malformed and non-finite tokens are rejected."""
    with pytest.raises(DataError):
        parse_number_token(token)


@pytest.mark.parametrize(
    "line, label",
    [
        ("x 1 2", "x"),
        ("x: 1 2", "x"),
        ("X 1 2", "X"),
        ("f 1 2", "f"),
        ("f(x) 1 2", "f"),
        ("F(x)\t1\t2", "f"),
    ],
)
def test_parse_labeled_row_labels(line, label):
    """Tests the accepted spellings of the row labels."""
    parsed_label, values = parse_labeled_row(line)
    assert parsed_label == label
    assert values == [1.0, 2.0]


@pytest.mark.parametrize(
    "line, message",
    [
        ("   ", "empty line"),
        ("x", "at least one numeric value"),
        ("y 1 2", "Unknown row label"),
        ("x 1 two", "Cannot parse"),
    ],
)
def test_parse_labeled_row_errors(line, message):
    """Tests the errors for malformed rows."""
    with pytest.raises(DataError, match=message):
        parse_labeled_row(line)


def test_parse_tabular_text_sample():
    """Tests parsing of a complete file with comma decimals and a blank line."""
    parsed = parse_tabular_text(SAMPLE)

    assert len(parsed.table) == 7
    np.testing.assert_allclose(parsed.table.x[:2], [0.43, 0.48])
    np.testing.assert_allclose(parsed.table.f[-1], 2.56453)
    np.testing.assert_allclose(parsed.X, [0.702, 0.741, 0.782, 0.812])


def test_parse_tabular_text_any_order_and_missing_points():
    """Tests that row order is free and a missing X row gives empty points."""
    parsed = parse_tabular_text("f 1 4 9\r\nx 1 2 3\r\n")
    np.testing.assert_allclose(parsed.table.x, [1.0, 2.0, 3.0])
    assert parsed.X.shape == (0,)


@pytest.mark.parametrize(
    "content, message",
    [
        ("x 1 2\nx 3 4\nf 1 2", "Duplicate x row"),
        ("x 1 2\nX 1\nX 2", "Duplicate X row"),
        ("x 1 2\nX 1.5", "both x and f rows"),
        ("f 1 2", "both x and f rows"),
        ("x 1 2\nf 1 2\ng 3 4", "Unknown row label"),
    ],
)
def test_parse_tabular_text_errors(content, message):
    """Tests the structural errors of the file format."""
    with pytest.raises(DataError, match=message):
        parse_tabular_text(content)


def test_parse_tabular_text_rejects_non_string():
    """Tests that only text is accepted."""
    with pytest.raises(DataError, match="must be a string"):
        parse_tabular_text(b"x 1 2")


def test_load_tabular_file_and_evaluate(tmp_path):
    """Tests loading a file from disk and running both tasks on it."""
    path = tmp_path / "table.txt"
    path.write_text(SAMPLE, encoding="utf-8")

    parsed = load_tabular_file(path)
    interp = parsed.table.summarize_interpolation(parsed.X)
    assert interp.max_abs_diff < 1e-9

    # nodes are not equally spaced, so only the interpolation derivative is available
    deriv = parsed.table.summarize_differentiation([0.5, 0.6, 0.702])
    assert all(row.interpolation5 is not None for row in deriv.rows)
    assert all(row.approximation5 is None for row in deriv.rows)
    assert deriv.mean_abs_diff is None


def test_points_beyond_sample_range_disable_both_methods():
    """Tests that X rows past the last node leave both derivative columns empty."""
    parsed = parse_tabular_text(SAMPLE)
    deriv = parsed.table.summarize_differentiation(parsed.X)

    assert len(deriv.rows) == 4
    assert all(row.interpolation5 is None for row in deriv.rows)
    assert all(row.approximation5 is None for row in deriv.rows)
    assert deriv.mean_abs_diff is None
    assert deriv.max_abs_diff is None

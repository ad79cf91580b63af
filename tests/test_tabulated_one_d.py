"""Unit tests for tabkit.tabulated_model.one_d."""

import numpy as np
import pytest

from tabkit.errors import DataError, MethodNotSupportedError
from tabkit.tabulated_model.one_d import (
    TabularFunction,
    parse_xf_table,
    tabular_from_table,
)


def test_tabular_function_copies_and_freezes_data():
    """Tests that nodes and values are copied and read-only."""
    x = [0.0, 1.0, 2.0]
    f = np.array([1.0, 2.0, 5.0])
    tab = TabularFunction(x, f)

    f[0] = 100.0
    assert tab.f[0] == 1.0
    assert len(tab) == 3
    with pytest.raises(ValueError):
        tab.x[0] = 3.0


def test_tabular_function_rejects_non_numeric():
    """Tests that non-numeric data cannot be stored."""
    with pytest.raises(DataError, match="sequence of numbers"):
        TabularFunction(["a", "b"], [1.0, 2.0])
    with pytest.raises(DataError, match="sequence of numbers"):
        TabularFunction(["0", "1"], [1.0, 2.0])


def test_validate_method():
    """Tests that validate() applies the requested minimum size."""
    tab = TabularFunction([0.0, 1.0, 2.0], [0.0, 1.0, 4.0])
    tab.validate()
    with pytest.raises(DataError, match="at least 5 points"):
        tab.validate(min_points=5)


def test_interpolate_and_differentiate_methods():
    """Tests the method-bound front end."""
    x = np.linspace(-1.0, 1.0, 9)
    tab = TabularFunction(x, x**3)

    np.testing.assert_allclose(tab.interpolate([0.1]).F, [0.001], atol=1e-12)
    np.testing.assert_allclose(tab.interpolate([0.1], method="newton").F, [0.001], atol=1e-12)
    np.testing.assert_allclose(tab.differentiate([0.5]).Fd, [0.75], atol=1e-10)
    np.testing.assert_allclose(
        tab.differentiate([0.5], method="approximation5").Fd, [0.75], atol=1e-10
    )
    with pytest.raises(MethodNotSupportedError):
        tab.differentiate([0.5], method="central")


def test_summaries_from_tabular_function():
    """Tests that the summaries can be built from the container."""
    x = np.linspace(0.0, 2.0, 11)
    tab = TabularFunction(x, np.sin(x))

    interp = tab.summarize_interpolation([0.3, 1.7])
    assert len(interp.rows) == 2

    deriv = tab.summarize_differentiation(x[:3])
    assert deriv.mean_abs_diff is not None
    assert deriv.max_abs_diff < 1e-3


def test_parse_xf_table_layout_2_n():
    """Tests that (2, N) tables are read row-wise."""
    x, f = parse_xf_table([[0.0, 1.0, 2.0], [5.0, 6.0, 7.0]])
    np.testing.assert_allclose(x, [0.0, 1.0, 2.0])
    np.testing.assert_allclose(f, [5.0, 6.0, 7.0])


@pytest.mark.parametrize("dtype", [float, int])
def test_parse_xf_table_layout_n_2(dtype):
    """Tests that (N, 2) tables are read column-wise for different dtypes."""
    x = np.array([0, 1, 2], dtype=dtype)
    f = np.array([10, 20, 30], dtype=dtype)
    x_parsed, f_parsed = parse_xf_table(np.column_stack([x, f]))
    np.testing.assert_allclose(x_parsed, x.astype(float))
    np.testing.assert_allclose(f_parsed, f.astype(float))


@pytest.mark.parametrize(
    "table",
    [
        [1.0, 2.0, 3.0],
        np.zeros((3, 3)),
        np.zeros((2, 2, 2)),
    ],
)
def test_parse_xf_table_rejects_other_shapes(table):
    """Tests that unsupported layouts raise DataError."""
    with pytest.raises(DataError):
        parse_xf_table(table)


def test_tabular_from_table():
    """Tests building a TabularFunction from a 2D table."""
    tab = tabular_from_table(np.array([[0.0, 1.0], [1.0, 3.0], [2.0, 5.0]]))
    assert isinstance(tab, TabularFunction)
    np.testing.assert_allclose(tab.x, [0.0, 1.0, 2.0])
    np.testing.assert_allclose(tab.f, [1.0, 3.0, 5.0])

"""Tests for tabkit.utils.grid."""

import numpy as np
import pytest

from tabkit.errors import DataError
from tabkit.utils.grid import (
    find_nearest_index,
    get_5_point_stencil_indices,
    get_approximate_step,
)


@pytest.mark.parametrize(
    "point, expected",
    [
        (-3.0, 0),
        (0.2, 0),
        (0.5, 0),  # tie goes to the lower index
        (0.51, 1),
        (1.5, 1),  # tie goes to the lower index
        (2.9, 3),
        (10.0, 3),
    ],
)
def test_find_nearest_index(point, expected):
    """Tests nearest-node lookup, including ties and points outside the grid."""
    assert find_nearest_index([0.0, 1.0, 2.0, 3.0], point) == expected


def test_find_nearest_index_empty_raises():
    """Tests that an empty node array is rejected."""
    with pytest.raises(DataError, match="empty array"):
        find_nearest_index([], 0.0)


def test_get_approximate_step_uniform():
    """Tests that a uniform grid returns its step."""
    assert get_approximate_step([0.0, 0.5, 1.0, 1.5]) == pytest.approx(0.5)
    assert get_approximate_step(np.linspace(-1.0, 1.0, 21)) == pytest.approx(0.1)


def test_get_approximate_step_within_tolerance():
    """Tests that spacing jitter below the tolerance is accepted."""
    h = get_approximate_step([0.0, 1.0, 2.0000001])
    assert h == pytest.approx(1.00000005)


@pytest.mark.parametrize(
    "x",
    [
        [0.0, 1.0, 2.5],
        [0.0, 1.0, 2.00001],
    ],
)
def test_get_approximate_step_nonuniform_is_none(x):
    """Tests that non-uniform grids report no step rather than raising."""
    assert get_approximate_step(x) is None


def test_get_approximate_step_custom_tolerance():
    """Tests that the tolerance argument widens the uniformity check."""
    x = [0.0, 1.0, 2.00001]
    assert get_approximate_step(x) is None
    assert get_approximate_step(x, tolerance=1e-4) == pytest.approx(1.000005)


@pytest.mark.parametrize("x", [[], [1.0]])
def test_get_approximate_step_too_few_nodes(x):
    """Tests that fewer than two nodes give no step."""
    assert get_approximate_step(x) is None


@pytest.mark.parametrize(
    "point, expected_start",
    [
        (0.0, 0),
        (0.9, 0),  # window would start at -1
        (2.5, 0),  # tie resolves to node 2
        (3.0, 1),
        (3.4, 1),
        (4.9, 2),  # window would end past the last node
        (6.0, 2),
    ],
)
def test_get_5_point_stencil_indices_shifts_at_edges(point, expected_start):
    """Tests that the window is centred when possible and shifted at the edges."""
    table = {"x": np.arange(7.0), "f": np.zeros(7)}
    idx = get_5_point_stencil_indices(table, point)
    np.testing.assert_array_equal(idx, np.arange(expected_start, expected_start + 5))


def test_get_5_point_stencil_indices_exactly_five_nodes():
    """Tests that a 5-node table always yields the whole table."""
    table = {"x": [0.0, 0.1, 0.3, 0.6, 1.0], "f": [0.0] * 5}
    for point in (0.0, 0.3, 1.0):
        idx = get_5_point_stencil_indices(table, point)
        np.testing.assert_array_equal(idx, [0, 1, 2, 3, 4])


def test_get_5_point_stencil_indices_needs_five_nodes():
    """Tests that fewer than five nodes are rejected."""
    table = {"x": [0.0, 1.0, 2.0, 3.0], "f": [0.0] * 4}
    with pytest.raises(DataError, match="At least 5 points"):
        get_5_point_stencil_indices(table, 1.0)

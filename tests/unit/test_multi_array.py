"""Unit tests for the N-dimensional array and selection masks.

Tests cover:
- Construction, get and set
- Bounds checking on every access
- Copies, iteration and nested-list conversion
- Nested bracket rendering for 1 to 4 dimensions
- Selection mask helpers
"""

import pytest

from vectorpad.domain import (
    SLOT_ANCHOR,
    SLOT_CONTROL_2,
    MultiArray,
    is_point_selected,
    new_selection_mask,
)
from vectorpad.exceptions import InvalidIndexError


class TestMultiArrayAccess:
    """Tests for element access."""

    def test_initial_value(self):
        """Every cell starts with the initial value."""
        arr = MultiArray([2, 3], False)
        assert arr.get(0, 0) is False
        assert arr.get(1, 2) is False
        assert arr.shape == (2, 3)
        assert arr.ndim == 2
        assert arr.size == 6

    def test_set_and_get(self):
        """A written value is read back."""
        arr = MultiArray([2, 2], 0)
        arr.set(5, 0, 1)
        assert arr.get(0, 1) == 5
        assert arr.get(1, 0) == 0

    def test_single_cell_mask(self):
        """Setting one cell of a 3x3 mask leaves the other eight False."""
        mask = MultiArray([3, 3], False)
        mask.set(True, 1, 2)

        assert mask.get(1, 2) is True
        cells = [(i, j) for i in range(3) for j in range(3) if (i, j) != (1, 2)]
        assert all(mask.get(i, j) is False for i, j in cells)

        with pytest.raises(InvalidIndexError):
            mask.get(3, 0)

    def test_rows_are_independent(self):
        """Cells of neighbouring rows do not alias."""
        arr = MultiArray([5, 3], False)
        arr.set(True, 0, 0)
        arr.set(True, 1, 0)
        assert arr.get(0, 0) is True
        assert arr.get(1, 0) is True
        assert arr.get(2, 0) is False
        assert arr.get(3, 0) is False

    def test_three_dimensional_access(self):
        """Row-major addressing works beyond two dimensions."""
        arr = MultiArray([2, 3, 4], 0)
        arr.set(7, 1, 2, 3)
        arr.set(9, 0, 1, 2)
        assert arr.get(1, 2, 3) == 7
        assert arr.get(0, 1, 2) == 9
        assert arr.to_list()[1][2][3] == 7


class TestMultiArrayBounds:
    """Tests for bounds checking."""

    @pytest.mark.parametrize(
        "indices",
        [(2, 0), (0, 2), (-1, 0), (0, -1), (5, 5)],
    )
    def test_out_of_bounds_get(self, indices):
        """Coordinates outside the shape raise InvalidIndexError."""
        arr = MultiArray([2, 2], 0)
        with pytest.raises(InvalidIndexError):
            arr.get(*indices)

    def test_out_of_bounds_set(self):
        """Writes outside the shape raise and change nothing."""
        arr = MultiArray([2, 2], 0)
        with pytest.raises(InvalidIndexError):
            arr.set(1, 0, 2)
        assert arr.to_list() == [[0, 0], [0, 0]]

    def test_wrong_rank(self):
        """The coordinate count must match the rank."""
        arr = MultiArray([2, 2], 0)
        with pytest.raises(InvalidIndexError):
            arr.get(0)
        with pytest.raises(InvalidIndexError):
            arr.set(1, 0, 0, 0)

    def test_invalid_index_is_index_error(self):
        """InvalidIndexError can be caught as a plain IndexError."""
        arr = MultiArray([1], 0)
        with pytest.raises(IndexError, match="out of bounds"):
            arr.get(1)

    def test_negative_dimension(self):
        """Negative dimensions are rejected at construction."""
        with pytest.raises(ValueError):
            MultiArray([2, -1], 0)


class TestMultiArrayCopyAndIteration:
    """Tests for copy, iteration and conversion."""

    def test_copy_is_independent(self):
        """Changing a copy leaves the original untouched."""
        arr = MultiArray([2, 2], 0)
        arr.set(1, 0, 0)
        arr.set(2, 1, 1)

        duplicate = arr.copy()
        assert duplicate is not arr
        assert duplicate == arr
        assert duplicate.get(0, 0) == 1
        assert duplicate.get(1, 1) == 2

        duplicate.set(9, 0, 1)
        assert arr.get(0, 1) == 0

    def test_to_list(self):
        """Nested list conversion follows row-major order."""
        arr = MultiArray([2, 3], 0)
        arr.set(1, 0, 1)
        arr.set(2, 1, 2)
        assert arr.to_list() == [[0, 1, 0], [0, 0, 2]]

    def test_iterates_rows(self):
        """Iteration yields one row per first index."""
        arr = MultiArray([2, 3], 0)
        arr.set(1, 0, 1)
        arr.set(2, 1, 2)
        assert list(arr) == [[0, 1, 0], [0, 0, 2]]
        assert len(arr) == 2

    def test_iterates_elements_in_one_dimension(self):
        """A 1D array iterates over its elements."""
        arr = MultiArray([3], "a")
        arr.set("b", 1)
        assert list(arr) == ["a", "b", "a"]

    def test_row_lookup(self):
        """Rows support 'any slot selected' lookups."""
        mask = MultiArray([3, 3], False)
        mask.set(True, 2, 1)
        assert [any(row) for row in mask] == [False, False, True]


class TestMultiArrayRendering:
    """Tests for nested bracket rendering."""

    def test_empty(self):
        """Zero-length arrays render as []."""
        assert str(MultiArray([0, 3], False)) == "[]"
        assert str(MultiArray([], 0)) == "[]"

    def test_one_dimension(self):
        """A 1D array renders on one line."""
        arr = MultiArray([3], 0)
        arr.set(4, 2)
        assert str(arr) == "[0, 0, 4]"

    def test_two_dimensions(self):
        """A 2D array renders one row per line."""
        arr = MultiArray([2, 3], 0)
        arr.set(1, 0, 1)
        arr.set(2, 1, 2)
        assert str(arr) == "[\n  [0, 1, 0],\n  [0, 0, 2]\n]"

    def test_three_dimensions(self):
        """Nested levels are indented two spaces each."""
        arr = MultiArray([2, 2, 2], 0)
        arr.set(1, 0, 0, 0)
        arr.set(2, 1, 1, 1)
        assert str(arr) == (
            "[\n  [\n    [1, 0],\n    [0, 0]\n  ],\n  [\n    [0, 0],\n    [0, 2]\n  ]\n]"
        )

    def test_four_dimensions(self):
        """Rendering recurses for any rank."""
        arr = MultiArray([2, 2, 2, 2], 0)
        arr.set(1, 0, 0, 0, 0)
        arr.set(2, 1, 1, 1, 1)
        expected = (
            "[\n"
            "  [\n"
            "    [\n      [1, 0],\n      [0, 0]\n    ],\n"
            "    [\n      [0, 0],\n      [0, 0]\n    ]\n"
            "  ],\n"
            "  [\n"
            "    [\n      [0, 0],\n      [0, 0]\n    ],\n"
            "    [\n      [0, 0],\n      [0, 2]\n    ]\n"
            "  ]\n"
            "]"
        )
        assert str(arr) == expected

    def test_booleans(self):
        """Boolean masks render with Python literals."""
        mask = new_selection_mask(1)
        mask.set(True, 0, 0)
        assert str(mask) == "[\n  [True, False, False]\n]"


class TestSelectionMask:
    """Tests for selection mask helpers."""

    def test_new_selection_mask_shape(self):
        """A mask has three slots per control point, all False."""
        mask = new_selection_mask(4)
        assert mask.shape == (4, 3)
        assert not any(any(row) for row in mask)

    def test_is_point_selected(self):
        """Any selected slot marks the point as selected."""
        mask = new_selection_mask(3)
        mask.set(True, 1, SLOT_CONTROL_2)
        assert not is_point_selected(mask, 0)
        assert is_point_selected(mask, 1)
        mask.set(True, 2, SLOT_ANCHOR)
        assert is_point_selected(mask, 2)

    def test_is_point_selected_out_of_range(self):
        """Looking up a point past the end raises InvalidIndexError."""
        mask = new_selection_mask(1)
        with pytest.raises(InvalidIndexError):
            is_point_selected(mask, 1)

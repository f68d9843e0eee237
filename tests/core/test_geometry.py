"""
Unit Tests for pixel/cell conversion and the overlap predicate.
"""

import itertools

import pytest

from snapgrid.core.geometry import cell_to_pixel, overlaps, pixel_to_cell, snap_pixel
from snapgrid.core.models import GridItem


class TestPixelConversion:
    """Tests for cell_to_pixel / pixel_to_cell."""

    def test_cell_to_pixel_multiplies(self):
        assert cell_to_pixel(4, 30) == 120

    @pytest.mark.parametrize("n", [-7, -1, 0, 1, 3, 25])
    @pytest.mark.parametrize("cell_size", [1, 7, 30])
    def test_round_trip_when_whole_cells_then_identity(self, n, cell_size):
        """pixel_to_cell(cell_to_pixel(n)) == n."""
        assert pixel_to_cell(cell_to_pixel(n, cell_size), cell_size) == n

    def test_pixel_to_cell_when_below_half_then_rounds_down(self):
        assert pixel_to_cell(14, 30) == 0
        assert pixel_to_cell(44, 30) == 1

    def test_pixel_to_cell_when_exactly_half_then_rounds_away_from_zero(self):
        """Ties go away from zero, unlike Python's round()."""
        assert pixel_to_cell(15, 30) == 1
        assert pixel_to_cell(45, 30) == 2
        assert pixel_to_cell(-15, 30) == -1
        assert pixel_to_cell(-45, 30) == -2

    def test_pixel_to_cell_when_negative_then_symmetric(self):
        assert pixel_to_cell(-44, 30) == -1
        assert pixel_to_cell(-10, 30) == 0

    def test_pixel_to_cell_when_float_then_rounds(self):
        assert pixel_to_cell(59.9, 30) == 2

    def test_pixel_to_cell_when_cell_size_zero_then_raises(self):
        with pytest.raises(ValueError):
            pixel_to_cell(10, 0)

    def test_snap_pixel_snaps_to_nearest_line(self):
        assert snap_pixel(44, 30) == 30
        assert snap_pixel(46, 30) == 60


class TestOverlaps:
    """Tests for the strict overlap predicate."""

    def test_overlaps_when_sharing_cells_then_true(self):
        assert overlaps(GridItem("a", 3, 1, 2, 2), GridItem("b", 4, 1, 1, 2)) is True

    def test_overlaps_when_touching_horizontally_then_false(self):
        assert overlaps(GridItem("a", 0, 0, 2, 2), GridItem("b", 2, 0, 2, 2)) is False

    def test_overlaps_when_touching_vertically_then_false(self):
        assert overlaps(GridItem("a", 0, 0, 2, 2), GridItem("b", 0, 2, 2, 2)) is False

    def test_overlaps_when_contained_then_true(self):
        assert overlaps(GridItem("a", 0, 0, 5, 5), GridItem("b", 1, 1, 1, 1)) is True

    def test_overlaps_when_diagonal_corner_touch_then_false(self):
        assert overlaps(GridItem("a", 0, 0, 1, 1), GridItem("b", 1, 1, 1, 1)) is False

    def test_overlaps_is_symmetric(self):
        """overlaps(a, b) == overlaps(b, a) across a grid of placements."""
        fixed = GridItem("a", 2, 2, 3, 2)
        for x, y, w, h in itertools.product(range(0, 7), range(0, 6), (1, 2, 4), (1, 3)):
            other = GridItem("b", x, y, w, h)
            assert overlaps(fixed, other) == overlaps(other, fixed)

"""
Unit Tests for GridItem, GridBounds and Layout models.
"""

import dataclasses

import pytest

from snapgrid.core.models import GridBounds, GridItem, Layout


class TestGridItem:
    """Tests for GridItem dataclass."""

    def test_init_when_valid_then_keeps_fields(self):
        """Valid items keep their geometry."""
        item = GridItem("a", x=2, y=3, w=4, h=5)
        assert (item.x, item.y, item.w, item.h) == (2, 3, 4, 5)
        assert item.right == 6
        assert item.bottom == 8

    def test_init_when_zero_size_then_corrects_to_minimum(self):
        """w <= 0 and h <= 0 are corrected to 1, not rejected."""
        item = GridItem("a", 0, 0, w=0, h=-3)
        assert (item.w, item.h) == (1, 1)

    def test_init_when_negative_position_then_allowed(self):
        """Out-of-range proposals are representable until clamped."""
        item = GridItem("a", -2, -1, 1, 1)
        assert (item.x, item.y) == (-2, -1)

    def test_item_is_frozen(self):
        item = GridItem("a", 0, 0, 1, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            item.x = 5

    def test_moved_to_returns_copy(self):
        item = GridItem("a", 0, 0, 2, 2)
        moved = item.moved_to(3, 1)
        assert moved == GridItem("a", 3, 1, 2, 2)
        assert item.x == 0

    def test_resized_to_when_below_minimum_then_clamped(self):
        item = GridItem("a", 1, 1, 2, 2)
        assert item.resized_to(0, 4) == GridItem("a", 1, 1, 1, 4)

    def test_from_dict_when_size_missing_then_defaults_to_one(self):
        item = GridItem.from_dict({"id": "x", "x": 1, "y": 2})
        assert item == GridItem("x", 1, 2, 1, 1)

    def test_to_dict_contains_all_fields(self):
        assert GridItem("a", 1, 2, 3, 4).to_dict() == {"id": "a", "x": 1, "y": 2, "w": 3, "h": 4}


class TestGridBounds:
    """Tests for GridBounds dataclass."""

    def test_from_pixels_when_partial_cells_then_floors(self):
        """Partial cells at the edge are not usable."""
        assert GridBounds.from_pixels(310, 95, 30) == GridBounds(10, 3)

    def test_from_pixels_when_exact_multiple_then_exact(self):
        assert GridBounds.from_pixels(300, 300, 30) == GridBounds(10, 10)

    def test_from_pixels_when_cell_size_zero_then_raises(self):
        with pytest.raises(ValueError, match="cell_size must be positive"):
            GridBounds.from_pixels(100, 100, 0)

    def test_init_when_negative_then_raises(self):
        with pytest.raises(ValueError, match="max_x must be >= 0"):
            GridBounds(-1, 5)

    def test_contains_when_touching_edges_then_true(self):
        bounds = GridBounds(5, 5)
        assert bounds.contains(GridItem("a", 3, 3, 2, 2)) is True

    def test_contains_when_past_edge_then_false(self):
        bounds = GridBounds(5, 5)
        assert bounds.contains(GridItem("a", 4, 0, 2, 1)) is False
        assert bounds.contains(GridItem("a", -1, 0, 1, 1)) is False


class TestLayout:
    """Tests for the immutable Layout mapping."""

    def test_from_items_when_duplicate_ids_then_raises(self):
        with pytest.raises(ValueError, match="Duplicate item id"):
            Layout.from_items([GridItem("a", 0, 0), GridItem("a", 1, 1)])

    def test_init_when_key_mismatch_then_raises(self):
        with pytest.raises(ValueError, match="does not match"):
            Layout({"a": GridItem("b", 0, 0)})

    def test_with_item_does_not_mutate_original(self, make_layout):
        layout = make_layout(("a", 0, 0, 2, 2))
        updated = layout.with_item(GridItem("a", 5, 5, 2, 2))
        assert layout["a"].x == 0
        assert updated["a"].x == 5

    def test_with_item_when_new_id_then_adds(self, make_layout):
        layout = make_layout(("a", 0, 0, 1, 1))
        assert set(layout.with_item(GridItem("b", 2, 2))) == {"a", "b"}

    def test_sorted_items_when_inserted_out_of_order_then_sorted_by_id(self):
        layout = Layout.from_items([GridItem("c", 0, 0), GridItem("a", 1, 0), GridItem("b", 2, 0)])
        assert [item.id for item in layout.sorted_items()] == ["a", "b", "c"]

    def test_equality_compares_contents(self, make_layout):
        assert make_layout(("a", 0, 0, 1, 1)) == make_layout(("a", 0, 0, 1, 1))
        assert make_layout(("a", 0, 0, 1, 1)) != make_layout(("a", 0, 1, 1, 1))

    def test_to_dict_is_keyed_by_id(self, make_layout):
        layout = make_layout(("b", 1, 1, 1, 1), ("a", 0, 0, 2, 2))
        assert list(layout.to_dict()) == ["a", "b"]
        assert layout.to_dict()["a"]["w"] == 2

"""
Unit tests for bounds clamping and layout-wide collision checks.
"""

import itertools

from snapgrid.core.models import GridBounds, GridItem
from snapgrid.engine import all_overlaps, any_overlap, clamp_item, clamp_layout, layout_violations


class TestClampItem:
    """Tests for clamp_item()."""

    def test_when_inside_then_returns_same_instance(self):
        item = GridItem("a", 1, 1, 2, 2)
        assert clamp_item(item, GridBounds(5, 5)) is item

    def test_when_dragged_past_right_edge_then_pinned_to_edge(self):
        """maxX=5, w=2, proposed x=10 -> x = 3."""
        clamped = clamp_item(GridItem("A", 10, 0, 2, 1), GridBounds(5, 5))
        assert clamped.x == 3

    def test_when_negative_then_pinned_to_zero(self):
        clamped = clamp_item(GridItem("a", -4, -2, 1, 1), GridBounds(5, 5))
        assert (clamped.x, clamped.y) == (0, 0)

    def test_when_past_bottom_then_pinned_to_bottom(self):
        clamped = clamp_item(GridItem("a", 0, 9, 1, 3), GridBounds(5, 10))
        assert clamped.y == 7

    def test_when_wider_than_container_then_x_zero_and_overflows(self):
        """Oversized items sit at 0 and are left overflowing."""
        clamped = clamp_item(GridItem("a", 2, 0, 8, 1), GridBounds(5, 5))
        assert clamped.x == 0
        assert clamped.w == 8

    def test_size_never_changes(self):
        clamped = clamp_item(GridItem("a", 20, 20, 3, 4), GridBounds(5, 5))
        assert (clamped.w, clamped.h) == (3, 4)

    def test_clamp_is_idempotent(self):
        bounds = GridBounds(6, 4)
        for x, y, w, h in itertools.product((-3, 0, 2, 9), (-1, 1, 7), (1, 3, 8), (1, 5)):
            once = clamp_item(GridItem("a", x, y, w, h), bounds)
            assert clamp_item(once, bounds) == once

    def test_clamp_layout_clamps_every_item(self, make_layout):
        layout = make_layout(("a", -1, 0, 1, 1), ("b", 9, 9, 2, 2))

        clamped = clamp_layout(layout, GridBounds(5, 5))

        assert clamped["a"].x == 0
        assert (clamped["b"].x, clamped["b"].y) == (3, 3)
        assert layout["b"].x == 9


class TestCollision:
    """Tests for any_overlap / all_overlaps / layout_violations."""

    def test_any_overlap_excludes_same_id(self, make_layout):
        layout = make_layout(("a", 0, 0, 2, 2), ("b", 2, 0, 2, 2))
        assert any_overlap(layout["a"], layout) is False

    def test_any_overlap_when_proposal_hits_other_then_true(self, make_layout):
        layout = make_layout(("a", 0, 0, 2, 2), ("b", 2, 0, 2, 2))
        assert any_overlap(GridItem("a", 1, 0, 2, 2), layout) is True

    def test_all_overlaps_returns_sorted_pairs(self, make_layout):
        layout = make_layout(("c", 0, 0, 2, 2), ("a", 1, 1, 2, 2), ("b", 5, 5, 1, 1))
        assert all_overlaps(layout) == {("a", "c")}

    def test_layout_violations_when_valid_then_empty(self, make_layout):
        layout = make_layout(("a", 0, 0, 2, 2), ("b", 2, 0, 2, 2))
        assert layout_violations(layout, GridBounds(4, 2)) == []

    def test_layout_violations_reports_bounds_and_overlaps(self, make_layout):
        layout = make_layout(("a", 0, 0, 2, 2), ("b", 1, 0, 4, 2))

        problems = layout_violations(layout, GridBounds(4, 4))

        assert any("b" in p and "outside bounds" in p for p in problems)
        assert "a overlaps b" in problems

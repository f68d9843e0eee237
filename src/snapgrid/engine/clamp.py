"""
Module: engine.clamp

Purpose:
    Keep items inside the container's cell bounds.

Key Functions:
    - clamp_item(): Clamp one item's position
    - clamp_layout(): Clamp every item in a layout

Notes:
    An item larger than the container is pinned to 0 on that axis and
    allowed to overflow. Nothing further is attempted for that case.
"""

from __future__ import annotations

from snapgrid.core.models import GridBounds, GridItem, Layout


def _clamp_axis(value: int, size: int, limit: int) -> int:
    return max(0, min(value, limit - size))


def clamp_item(item: GridItem, bounds: GridBounds) -> GridItem:
    """
    Return a copy of `item` moved inside `bounds`.

    x is forced into [0, max_x - w] and y into [0, max_y - h]. Size is
    never changed.

    Args:
        item: Item to clamp
        bounds: Container bounds in cells

    Returns:
        The same instance when already inside, otherwise a moved copy

    Example:
        >>> clamp_item(GridItem("a", 10, 0, w=2, h=1), GridBounds(5, 5)).x
        3
    """
    x = _clamp_axis(item.x, item.w, bounds.max_x)
    y = _clamp_axis(item.y, item.h, bounds.max_y)
    if x == item.x and y == item.y:
        return item
    return item.moved_to(x, y)


def clamp_layout(layout: Layout, bounds: GridBounds) -> Layout:
    """Clamp every item in `layout`; returns a new Layout."""
    return Layout({item_id: clamp_item(item, bounds) for item_id, item in layout.items()})

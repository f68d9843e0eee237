"""
Module: engine.resolver

Purpose:
    Single entry point for turning a proposed change into a valid layout.
    Clamp -> Reflow -> Clamp

Key Functions:
    - resolve(): Resolve a layout around the anchor that just changed

Algorithm:
    1. Clamp every item (bounds the raw proposal, e.g. a drag past the edge)
    2. Reflow from the anchor (bounds-unaware, may push past the bottom)
    3. Clamp every item again (pulls pushed items back inside)

    No third pass runs. A container without enough vertical room can
    therefore end with overlaps; they are logged, not hidden.

Dependencies:
    - engine.clamp, engine.reflow, engine.collision
    - core.models: Layout, GridBounds

Used By:
    - engine.controller
"""

from __future__ import annotations

import logging

from snapgrid.core.models import GridBounds, Layout

from .clamp import clamp_layout
from .collision import any_overlap
from .reflow import reflow

logger = logging.getLogger(__name__)


def resolve(layout: Layout, anchor_id: str, bounds: GridBounds) -> Layout:
    """
    Resolve `layout` after the anchor item was moved or resized.

    Args:
        layout: Full proposed layout (the anchor at its new geometry)
        anchor_id: Id of the moved/resized item
        bounds: Current container bounds in cells

    Returns:
        Resolved Layout. `layout` unchanged if the anchor is missing.

    Raises:
        ReflowDivergenceError: If the push cascade does not settle

    Example:
        >>> layout = Layout.from_items([
        ...     GridItem("A", 3, 1, 2, 2),
        ...     GridItem("B", 4, 1, 1, 2),
        ... ])
        >>> resolve(layout, "A", GridBounds(10, 10))["B"]
        GridItem('B', 4, 3, 1, 2)
    """
    if anchor_id not in layout:
        logger.warning(f"Resolve called with unknown anchor {anchor_id!r}; layout unchanged")
        return layout

    clamped = clamp_layout(layout, bounds)
    reflowed = reflow(clamped, anchor_id)
    result = clamp_layout(reflowed, bounds)

    # Only the second clamp can put a pushed item back on top of another
    pulled_back = [
        item_id for item_id, item in result.items()
        if item is not reflowed[item_id] and any_overlap(item, result)
    ]
    if pulled_back:
        logger.warning(
            f"Container {bounds.max_x}x{bounds.max_y} too small to separate items; "
            f"still overlapping after clamp: {sorted(pulled_back)}"
        )

    return result

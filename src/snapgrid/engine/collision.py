"""
Module: engine.collision

Purpose:
    Overlap checks over a whole layout, built on core.geometry.overlaps.

Key Functions:
    - any_overlap(): Does one item hit any other item?
    - all_overlaps(): Every overlapping id pair (verification only)
    - layout_violations(): Readable list of broken layout invariants

Dependencies:
    - core.geometry: overlaps predicate
    - core.models: GridItem, GridBounds, Layout

Used By:
    - engine.resolver: Post-resolve overlap warning
    - tests
"""

from __future__ import annotations

from typing import List, Set, Tuple

from snapgrid.core.geometry import overlaps
from snapgrid.core.models import GridBounds, GridItem, Layout


def any_overlap(item: GridItem, layout: Layout) -> bool:
    """
    Check if `item` overlaps any other item in `layout`.

    The layout entry sharing `item.id` is skipped, so the item may or may
    not already be part of the layout.

    Args:
        item: Item to test
        layout: Layout to test against

    Returns:
        True if at least one other item overlaps
    """
    return any(
        overlaps(item, other)
        for other in layout.values()
        if other.id != item.id
    )


def all_overlaps(layout: Layout) -> Set[Tuple[str, str]]:
    """
    Find every overlapping pair in a layout.

    O(n^2); not for the per-tick hot path.

    Returns:
        Set of (id_a, id_b) tuples with id_a < id_b
    """
    items = layout.sorted_items()
    pairs: Set[Tuple[str, str]] = set()
    for i, a in enumerate(items):
        for b in items[i + 1:]:
            if overlaps(a, b):
                pairs.add((a.id, b.id))
    return pairs


def layout_violations(layout: Layout, bounds: GridBounds) -> List[str]:
    """
    List the ways a layout breaks the committed-layout invariants.

    Args:
        layout: Layout to check
        bounds: Container bounds in cells

    Returns:
        One message per out-of-bounds item and per overlapping pair;
        empty when the layout is valid
    """
    problems: List[str] = []
    for item in layout.sorted_items():
        if not bounds.contains(item):
            problems.append(
                f"{item.id} at ({item.x}, {item.y}, {item.w}, {item.h}) "
                f"outside bounds {bounds.max_x}x{bounds.max_y}"
            )
    for a_id, b_id in sorted(all_overlaps(layout)):
        problems.append(f"{a_id} overlaps {b_id}")
    return problems

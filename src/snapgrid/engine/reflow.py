"""
Module: engine.reflow

Purpose:
    Resolve the overlaps created by moving or resizing one item (the
    anchor) by pushing the other items straight down.

Key Functions:
    - reflow(): Breadth-first cascading push from the anchor

Algorithm:
    1. Queue starts with the anchor
    2. Pop `current`; for every other item in ascending id order that
       overlaps it, move that item to `current.bottom` and queue it
    3. Stop when the queue is empty

    Items only ever move down, so a horizontal position chosen by the
    user survives. The anchor itself never moves. Items that no chain of
    overlaps reaches from the anchor are untouched.

Dependencies:
    - core.geometry: overlaps predicate
    - core.models: Layout, GridItem
    - engine.errors: ReflowDivergenceError

Used By:
    - engine.resolver
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Dict, Optional

from snapgrid.core.geometry import overlaps
from snapgrid.core.models import GridItem, Layout

from .errors import ReflowDivergenceError

logger = logging.getLogger(__name__)


def reflow(layout: Layout, anchor_id: str, max_pushes: Optional[int] = None) -> Layout:
    """
    Push items down until nothing overlaps the anchor's cascade.

    The input layout is not modified.

    Args:
        layout: Layout containing the anchor at its proposed geometry
        anchor_id: Id of the item that was moved or resized
        max_pushes: Pushes allowed per item (default: number of items)

    Returns:
        New Layout with pushed items; `layout` itself if the anchor is
        missing or nothing had to move

    Raises:
        ReflowDivergenceError: If an item is pushed more than max_pushes times
    """
    if anchor_id not in layout:
        return layout

    limit = len(layout) if max_pushes is None else max_pushes
    order = sorted(layout)
    working: Dict[str, GridItem] = dict(layout)
    push_counts: Dict[str, int] = {}

    queue: Deque[str] = deque([anchor_id])
    while queue:
        current = working[queue.popleft()]
        for other_id in order:
            if other_id == anchor_id or other_id == current.id:
                continue
            other = working[other_id]
            if not overlaps(current, other):
                continue

            pushes = push_counts.get(other_id, 0) + 1
            if pushes > limit:
                raise ReflowDivergenceError(other_id, pushes, limit)
            push_counts[other_id] = pushes

            working[other_id] = other.moved_to(other.x, current.bottom)
            queue.append(other_id)

    if not push_counts:
        return layout

    logger.debug(
        f"Reflow from {anchor_id!r} pushed {len(push_counts)} items "
        f"({sum(push_counts.values())} pushes)"
    )
    return Layout(working)

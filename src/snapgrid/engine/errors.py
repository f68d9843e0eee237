"""
Module: engine.errors

Purpose:
    Exception taxonomy for the layout engine. Geometry and bounds
    problems are corrected silently; only the cases below are raised.

Key Classes:
    - LayoutError: Base class
    - ReflowDivergenceError: Push cascade exceeded its guard
    - InteractionError: Invalid state machine transition
    - UnknownItemError: Selection of an id not in the layout
"""

from __future__ import annotations


class LayoutError(Exception):
    """Base class for layout engine errors."""
    pass


class ReflowDivergenceError(LayoutError):
    """
    Reflow pushed one item more often than the guard allows.

    Attributes:
        item_id: Item whose push count overflowed
        pushes: Push count reached
        limit: Allowed pushes per item
    """

    def __init__(self, item_id: str, pushes: int, limit: int) -> None:
        super().__init__(
            f"Reflow diverged: item {item_id!r} pushed {pushes} times (limit {limit})"
        )
        self.item_id = item_id
        self.pushes = pushes
        self.limit = limit


class InteractionError(LayoutError):
    """Gesture call made from a state that does not allow it."""
    pass


class UnknownItemError(InteractionError, KeyError):
    """Item id not present in the committed layout."""

    def __str__(self) -> str:
        # KeyError quotes its message; keep the plain text
        return str(self.args[0]) if self.args else ""

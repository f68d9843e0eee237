"""
Module: items

Purpose:
    Provides the GridItem dataclass - a rectangular widget positioned on
    the cell grid. All positions and sizes are in cells, never pixels.

Key Functions:
    - GridItem.moved_to(x, y): Copy at a new top-left cell
    - GridItem.resized_to(w, h): Copy with new cell dimensions
    - GridItem.to_dict(): Snapshot for renderers and fixtures
    - GridItem.from_dict(data): Build from a snapshot

Dependencies:
    - dataclasses (std)

Used By:
    - core.models.layout.Layout
    - core.geometry
    - engine (collision, reflow, clamp, resolver, controller)
"""

from __future__ import annotations

from dataclasses import dataclass, replace

MIN_ITEM_SIZE = 1


@dataclass(frozen=True, slots=True)
class GridItem:
    """
    Rectangular item on the grid, in cell units (immutable).

    The item covers columns [x, x + w) and rows [y, y + h).

    Attributes:
        id: Opaque unique identity, stable for the item's lifetime
        x: Column of the top-left cell
        y: Row of the top-left cell
        w: Width in cells
        h: Height in cells

    Invariants:
        - w >= 1
        - h >= 1

    x and y are NOT validated: a drag proposal may point past the
    container edge until the clamp pulls it back in.

    Example:
        >>> item = GridItem("a", x=2, y=1, w=3, h=2)
        >>> item.right, item.bottom
        (5, 3)
        >>> GridItem("b", 0, 0, w=0, h=-4).w
        1
    """

    id: str
    x: int
    y: int
    w: int = MIN_ITEM_SIZE
    h: int = MIN_ITEM_SIZE

    def __post_init__(self) -> None:
        """Correct degenerate sizes to the 1x1 minimum."""
        if self.w < MIN_ITEM_SIZE:
            object.__setattr__(self, "w", MIN_ITEM_SIZE)
        if self.h < MIN_ITEM_SIZE:
            object.__setattr__(self, "h", MIN_ITEM_SIZE)

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def right(self) -> int:
        """First column to the right of the item (exclusive edge)."""
        return self.x + self.w

    @property
    def bottom(self) -> int:
        """First row below the item (exclusive edge)."""
        return self.y + self.h

    # ─────────────────────────────────────────────────────────────────────────
    # Copies
    # ─────────────────────────────────────────────────────────────────────────

    def moved_to(self, x: int, y: int) -> GridItem:
        """Return a copy placed at (x, y) with the same size."""
        return replace(self, x=x, y=y)

    def resized_to(self, w: int, h: int) -> GridItem:
        """Return a copy with size (w, h); sizes below 1 become 1."""
        return replace(self, w=w, h=h)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        """
        Serialize to a plain dictionary.

        Returns:
            Dict with id, x, y, w, h
        """
        return {"id": self.id, "x": self.x, "y": self.y, "w": self.w, "h": self.h}

    @classmethod
    def from_dict(cls, data: dict) -> GridItem:
        """
        Build an item from a dictionary.

        Args:
            data: Dict with id, x, y and optionally w, h

        Returns:
            GridItem instance
        """
        return cls(
            id=str(data["id"]),
            x=int(data["x"]),
            y=int(data["y"]),
            w=int(data.get("w", MIN_ITEM_SIZE)),
            h=int(data.get("h", MIN_ITEM_SIZE)),
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return f"GridItem({self.id!r}, {self.x}, {self.y}, {self.w}, {self.h})"

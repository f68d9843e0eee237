"""
Module: layout

Purpose:
    Provides the Layout mapping - an immutable id -> GridItem collection.
    Both the committed layout and the drag/resize preview are Layouts;
    a preview is a full replacement, never a diff.

Key Functions:
    - Layout.from_items(items): Build from an iterable, rejecting duplicates
    - Layout.with_item(item): Copy with one item added or replaced
    - Layout.sorted_items(): Items in ascending id order
    - Layout.to_dict(): Snapshot for renderers

Dependencies:
    - collections.abc (std)
    - core.models.items.GridItem

Used By:
    - engine (collision, reflow, clamp, resolver, controller)
    - gui.widgets.grid_canvas
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Dict, List

from .items import GridItem


class Layout(Mapping[str, GridItem]):
    """
    Immutable mapping from item id to GridItem.

    Every "modification" returns a new Layout, so a committed layout can be
    shared as the base of every drag tick without copying.

    Example:
        >>> layout = Layout.from_items([GridItem("a", 0, 0, 2, 2)])
        >>> moved = layout.with_item(GridItem("a", 3, 1, 2, 2))
        >>> layout["a"].x, moved["a"].x
        (0, 3)
    """

    __slots__ = ("_items",)

    def __init__(self, items: Mapping[str, GridItem] | None = None) -> None:
        self._items: Dict[str, GridItem] = {}
        for key, item in (items or {}).items():
            if key != item.id:
                raise ValueError(f"Layout key {key!r} does not match item id {item.id!r}")
            self._items[key] = item

    @classmethod
    def from_items(cls, items: Iterable[GridItem]) -> Layout:
        """
        Build a layout from items.

        Args:
            items: GridItems with unique ids

        Returns:
            New Layout

        Raises:
            ValueError: If two items share an id
        """
        mapping: Dict[str, GridItem] = {}
        for item in items:
            if item.id in mapping:
                raise ValueError(f"Duplicate item id: {item.id!r}")
            mapping[item.id] = item
        return cls(mapping)

    # ─────────────────────────────────────────────────────────────────────────
    # Mapping protocol
    # ─────────────────────────────────────────────────────────────────────────

    def __getitem__(self, key: str) -> GridItem:
        return self._items[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    # ─────────────────────────────────────────────────────────────────────────
    # Functional updates
    # ─────────────────────────────────────────────────────────────────────────

    def with_item(self, item: GridItem) -> Layout:
        """Return a copy with `item` added, or replacing the item with its id."""
        items = dict(self._items)
        items[item.id] = item
        return Layout(items)

    def sorted_items(self) -> List[GridItem]:
        """Items in ascending id order (the deterministic reflow order)."""
        return [self._items[key] for key in sorted(self._items)]

    def to_dict(self) -> dict:
        """Serialize to {id: item_dict} in id order."""
        return {item.id: item.to_dict() for item in self.sorted_items()}

    def __repr__(self) -> str:
        inner = ", ".join(repr(item) for item in self.sorted_items())
        return f"Layout([{inner}])"

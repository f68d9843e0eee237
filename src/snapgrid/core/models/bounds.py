"""
Module: bounds

Purpose:
    Provides the GridBounds dataclass - the container's size expressed in
    whole cells. Derived from the container's pixel size on every resolve,
    never cached, because the container can change between interactions.

Key Functions:
    - GridBounds.from_pixels(width, height, cell_size): Floor-divide pixels
    - GridBounds.contains(item): Check an item lies fully inside

Dependencies:
    - dataclasses (std)

Used By:
    - engine.clamp
    - engine.resolver
    - engine.controller
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .items import GridItem


@dataclass(frozen=True, slots=True)
class GridBounds:
    """
    Container extent in cells (immutable).

    Attributes:
        max_x: Number of whole columns that fit in the container
        max_y: Number of whole rows that fit in the container

    Invariants:
        - max_x >= 0
        - max_y >= 0

    Example:
        >>> GridBounds.from_pixels(310, 95, cell_size=30)
        GridBounds(max_x=10, max_y=3)
    """

    max_x: int
    max_y: int

    def __post_init__(self) -> None:
        """Validate bounds on construction."""
        if self.max_x < 0:
            raise ValueError(f"max_x must be >= 0: {self.max_x}")
        if self.max_y < 0:
            raise ValueError(f"max_y must be >= 0: {self.max_y}")

    @classmethod
    def from_pixels(cls, width: float, height: float, cell_size: int) -> GridBounds:
        """
        Derive cell bounds from a container's pixel size.

        Partial cells at the right and bottom edges are not usable.

        Args:
            width: Container width in pixels
            height: Container height in pixels
            cell_size: Cell edge length in pixels

        Returns:
            GridBounds with floor(width / cell_size), floor(height / cell_size)

        Raises:
            ValueError: If cell_size is not positive
        """
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive: {cell_size}")
        return cls(
            max_x=max(0, int(width // cell_size)),
            max_y=max(0, int(height // cell_size)),
        )

    def contains(self, item: GridItem) -> bool:
        """
        Check if an item lies fully inside the bounds.

        Args:
            item: Item to check

        Returns:
            True if 0 <= x, 0 <= y, right <= max_x and bottom <= max_y
        """
        return (
            item.x >= 0
            and item.y >= 0
            and item.right <= self.max_x
            and item.bottom <= self.max_y
        )

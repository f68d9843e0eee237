"""
Module: engine.config

Purpose:
    Configuration for the grid engine and the editor canvas.
    Cell size is a constant handed in by the caller, not loaded from disk.

Key Classes:
    - GridConfig: Immutable grid configuration

Dependencies:
    - dataclasses (std)

Used By:
    - engine.controller: Pixel -> cell conversion, bounds derivation
    - gui.widgets.grid_canvas: Grid line drawing
"""

from __future__ import annotations

from dataclasses import dataclass

from snapgrid.core.models.items import MIN_ITEM_SIZE


# Pixel size of one grid cell
GRID_SIZE = 30
# Editor zoom factor applied on top of GRID_SIZE
DEFAULT_SCALE = 1
# A heavier grid line is drawn every N cells
DEFAULT_MAJOR_EVERY = 5


@dataclass(frozen=True)
class GridConfig:
    """
    Configuration for the grid (immutable).

    Attributes:
        cell_size: Cell edge length in pixels at scale 1
        scale: Integer zoom factor for the editor
        major_every: Cells between major grid lines
        min_item_size: Smallest width/height an item can be resized to

    Example:
        >>> config = GridConfig(cell_size=20, scale=2)
        >>> config.cell_pixels
        40
    """

    cell_size: int = GRID_SIZE
    scale: int = DEFAULT_SCALE
    major_every: int = DEFAULT_MAJOR_EVERY
    min_item_size: int = MIN_ITEM_SIZE

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive: {self.cell_size}")
        if self.scale <= 0:
            raise ValueError(f"scale must be positive: {self.scale}")
        if self.major_every <= 0:
            raise ValueError(f"major_every must be positive: {self.major_every}")
        if self.min_item_size < MIN_ITEM_SIZE:
            raise ValueError(
                f"min_item_size must be >= {MIN_ITEM_SIZE}: {self.min_item_size}"
            )

    @property
    def cell_pixels(self) -> int:
        """On-screen cell edge length (cell_size * scale)."""
        return self.cell_size * self.scale

    @property
    def major_pixels(self) -> int:
        """On-screen distance between major grid lines."""
        return self.cell_pixels * self.major_every

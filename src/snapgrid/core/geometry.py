"""
Module: core.geometry

Purpose:
    Pixel <-> cell conversion and the axis-aligned overlap predicate.
    Conversion is lossy: continuous pointer motion snaps to whole cells.

Key Functions:
    - cell_to_pixel(): Cells to pixels
    - pixel_to_cell(): Pixels to the nearest cell (half away from zero)
    - snap_pixel(): Pixels to the nearest grid line, in pixels
    - overlaps(): Strict rectangle intersection test

Dependencies:
    - math (std)
    - core.models.items.GridItem

Used By:
    - engine.collision
    - engine.reflow
    - engine.controller
"""

from __future__ import annotations

import math

from .models.items import GridItem


def cell_to_pixel(n: int, cell_size: int) -> int:
    """
    Convert a cell count to pixels.

    Args:
        n: Number of cells
        cell_size: Cell edge length in pixels

    Returns:
        n * cell_size
    """
    return n * cell_size


def pixel_to_cell(p: float, cell_size: int) -> int:
    """
    Convert a pixel measurement to the nearest whole cell.

    Ties round away from zero, so a half-cell drag in either direction
    counts as a full cell. The built-in round() would round ties to even.

    Args:
        p: Pixel value (may be negative, e.g. a leftward drag delta)
        cell_size: Cell edge length in pixels

    Returns:
        Rounded cell count

    Raises:
        ValueError: If cell_size is not positive

    Example:
        >>> pixel_to_cell(45, 30), pixel_to_cell(-45, 30)
        (2, -2)
    """
    if cell_size <= 0:
        raise ValueError(f"cell_size must be positive: {cell_size}")
    ratio = p / cell_size
    return int(math.copysign(math.floor(abs(ratio) + 0.5), ratio))


def snap_pixel(p: float, cell_size: int) -> int:
    """Snap a pixel value to the nearest grid line."""
    return cell_to_pixel(pixel_to_cell(p, cell_size), cell_size)


def overlaps(a: GridItem, b: GridItem) -> bool:
    """
    Check if two item rectangles intersect with positive area.

    Touching edges do NOT overlap. The test is symmetric. Callers must
    not pass the same item as both arguments.

    Args:
        a: First item
        b: Second item

    Returns:
        True if the rectangles share at least one cell
    """
    return not (
        a.right <= b.x
        or a.x >= b.right
        or a.bottom <= b.y
        or a.y >= b.bottom
    )

"""
SnapGrid Core Package

Data models and cell geometry shared by the engine and the editor.
Nothing in this package knows about gestures, Qt or container widgets.
"""

from .models import GridItem, GridBounds, Layout, MIN_ITEM_SIZE
from .geometry import cell_to_pixel, pixel_to_cell, snap_pixel, overlaps

__all__ = [
    "GridItem",
    "GridBounds",
    "Layout",
    "MIN_ITEM_SIZE",
    "cell_to_pixel",
    "pixel_to_cell",
    "snap_pixel",
    "overlaps",
]

"""
Module: engine

Purpose:
    Collision, reflow, clamping and interaction logic for the grid.

Key Functions:
    - resolve(): Clamp -> reflow -> clamp for a proposed change
    - reflow(): Cascading push-down from an anchor item
    - clamp_item() / clamp_layout(): Keep items inside bounds
    - any_overlap() / all_overlaps(): Collision checks

Key Classes:
    - GridConfig: Grid configuration
    - InteractionController: Selection and drag/resize state machine

Used By:
    - gui.widgets.grid_canvas
"""

from .config import GridConfig, GRID_SIZE
from .errors import (
    LayoutError,
    ReflowDivergenceError,
    InteractionError,
    UnknownItemError,
)
from .collision import any_overlap, all_overlaps, layout_violations
from .reflow import reflow
from .clamp import clamp_item, clamp_layout
from .resolver import resolve
from .controller import InteractionController, InteractionState

__all__ = [
    # Config
    "GridConfig",
    "GRID_SIZE",
    # Errors
    "LayoutError",
    "ReflowDivergenceError",
    "InteractionError",
    "UnknownItemError",
    # Functions
    "any_overlap",
    "all_overlaps",
    "layout_violations",
    "reflow",
    "clamp_item",
    "clamp_layout",
    "resolve",
    # Interaction
    "InteractionController",
    "InteractionState",
]

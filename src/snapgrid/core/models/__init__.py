"""
Core Models Package

Immutable data models for the grid layout engine.

**DESIGN RATIONALE:**

All models in this package are frozen. This ensures:
1. A drag tick can never mutate the committed layout it starts from
2. The committed layout can be shared as the base of every tick
3. Items can be compared by value in tests and no-op checks
"""

from .items import GridItem, MIN_ITEM_SIZE
from .bounds import GridBounds
from .layout import Layout

__all__ = [
    "GridItem",
    "MIN_ITEM_SIZE",
    "GridBounds",
    "Layout",
]

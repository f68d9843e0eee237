import os
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import snapgrid
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

# GUI tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from snapgrid.core.models import GridBounds, GridItem, Layout


# Common test fixtures
@pytest.fixture
def make_layout():
    """Factory: build a Layout from (id, x, y, w, h) tuples."""
    def _create(*specs):
        return Layout.from_items(GridItem(*spec) for spec in specs)
    return _create


@pytest.fixture
def large_bounds():
    """Bounds big enough that clamping never interferes."""
    return GridBounds(max_x=100, max_y=100)


@pytest.fixture
def ten_by_ten():
    return GridBounds(max_x=10, max_y=10)

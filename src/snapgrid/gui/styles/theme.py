"""
Theme definitions for the SnapGrid editor.
"""

class Colors:
    # Canvas
    BACKGROUND = "#f5f5f5"
    GRID_MINOR = "#e6e6e6"
    GRID_MAJOR = "#c8c8c8"

    # Items
    ITEM_FILL = "#ffffff"
    ITEM_BORDER = "#9e9e9e"
    ITEM_TEXT = "#1f1f1f"
    PREVIEW_FILL = "#F0F9FF"

    # Selection
    SELECTION = "#0364B8"
    HANDLE = "#0364B8"


class ColorsDark:
    """Dark palette."""

    BACKGROUND = "#1e1e1e"
    GRID_MINOR = "#2a2a2a"
    GRID_MAJOR = "#3d3d3d"

    ITEM_FILL = "#2d2d30"
    ITEM_BORDER = "#5a5a5a"
    ITEM_TEXT = "#e6e6e6"
    PREVIEW_FILL = "#1a3a52"

    SELECTION = "#4da3ff"
    HANDLE = "#4da3ff"


_is_dark_mode = False

def set_dark_mode(is_dark: bool):
    """Explicitly set the dark mode state."""
    global _is_dark_mode
    _is_dark_mode = is_dark

def get_colors():
    """Get the appropriate color palette based on current theme."""
    return ColorsDark if _is_dark_mode else Colors

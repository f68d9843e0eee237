from .grid_canvas import GridCanvas

__all__ = ["GridCanvas"]

"""Top-level package for SnapGrid.

Provides subpackages:
- snapgrid.core – grid items, bounds, layouts and cell geometry
- snapgrid.engine – collision, reflow, clamping and the interaction controller
- snapgrid.gui – PySide6 editor canvas
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text()
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.1.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    try:
        from importlib.metadata import version as pkg_version
        return pkg_version("snapgrid")
    except Exception:
        return "0.0.0"

__version__ = _get_version()
__copyright__ = "Copyright 2026 The SnapGrid Authors. Licensed under the MIT License"
__all__: list[str] = ["__version__"]

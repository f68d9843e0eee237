"""
Entry point for the PySide6 editor.
"""
import sys

from snapgrid.core.models import GridItem

DEFAULT_ITEMS = (
    GridItem("Target", 0, 0, 4, 3),
    GridItem("Chart", 5, 0, 6, 4),
    GridItem("Clock", 12, 0, 3, 3),
    GridItem("Notes", 0, 4, 4, 5),
)


def run():
    """
    Main entry point for the GUI application.
    """
    from PySide6.QtWidgets import QApplication
    from snapgrid.gui.main_window import MainWindow

    app = QApplication(sys.argv)
    app.setApplicationName("SnapGrid")
    app.setApplicationDisplayName("SnapGrid")

    window = MainWindow(DEFAULT_ITEMS)
    window.resize(window.canvas.sizeHint())
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()

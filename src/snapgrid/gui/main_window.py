"""
Main window for the SnapGrid editor.
"""
from __future__ import annotations

from typing import Iterable, Optional

from PySide6.QtGui import QAction
from PySide6.QtWidgets import QMainWindow

from snapgrid.core.models import GridItem, Layout
from snapgrid.engine import GridConfig
from snapgrid.gui.styles.theme import set_dark_mode
from snapgrid.gui.utils.logging_utils import attach_status_handler, detach_status_handler
from snapgrid.gui.widgets.grid_canvas import GridCanvas

STATUS_TIMEOUT_MS = 5000


class MainWindow(QMainWindow):
    """Hosts the grid canvas and reports selection and warnings in the status bar."""

    def __init__(
        self,
        items: Layout | Iterable[GridItem],
        config: Optional[GridConfig] = None,
        parent=None,
    ):
        super().__init__(parent)
        self.setWindowTitle("SnapGrid")

        self.canvas = GridCanvas(items, config=config, parent=self)
        self.setCentralWidget(self.canvas)
        self.canvas.selectionChanged.connect(self._on_selection_changed)
        self.canvas.layoutCommitted.connect(self._on_layout_committed)

        view_menu = self.menuBar().addMenu("View")
        self.dark_mode_action = QAction("Dark Mode", self)
        self.dark_mode_action.setCheckable(True)
        self.dark_mode_action.toggled.connect(self._toggle_theme)
        view_menu.addAction(self.dark_mode_action)

        self._log_handler = attach_status_handler()
        self._log_handler.signals.message.connect(self._on_log_message)

        self.statusBar().showMessage("Click an item to select it")

    def _on_selection_changed(self, item_id: str):
        if item_id:
            self.statusBar().showMessage(f"Selected {item_id}")
        else:
            self.statusBar().clearMessage()

    def _on_layout_committed(self):
        item_id = self.canvas.controller.selected_id
        if item_id is None:
            return
        item = self.canvas.controller.committed_layout[item_id]
        self.statusBar().showMessage(
            f"{item_id}: x={item.x} y={item.y} w={item.w} h={item.h}"
        )

    def _toggle_theme(self, checked: bool):
        """Handle dark mode toggle."""
        set_dark_mode(checked)
        self.canvas.update()

    def _on_log_message(self, message: str, level: str):
        self.statusBar().showMessage(f"{level}: {message}", STATUS_TIMEOUT_MS)

    def closeEvent(self, event):
        if self._log_handler is not None:
            detach_status_handler(self._log_handler)
            self._log_handler = None
        super().closeEvent(event)

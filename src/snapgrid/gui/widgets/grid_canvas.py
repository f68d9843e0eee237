"""
Grid canvas widget.

Draws the grid and the items of the controller's display layout, and
translates mouse gestures into InteractionController calls. The canvas
never decides geometry itself: it reports raw pixel deltas and sizes,
and paints whatever layout the controller hands back.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional

from PySide6.QtCore import QPointF, QRectF, QSize, Qt, Signal
from PySide6.QtGui import QColor, QPainter, QPen
from PySide6.QtWidgets import QWidget

from snapgrid.core.geometry import cell_to_pixel
from snapgrid.core.models import GridItem, Layout
from snapgrid.engine import GridConfig, InteractionController, InteractionState
from snapgrid.gui.styles.theme import get_colors

logger = logging.getLogger(__name__)

HANDLE_SIZE = 10


class GridCanvas(QWidget):
    """
    Editor surface for a grid layout.

    Press on an item selects it; press on the selected item starts a drag;
    press on its bottom-right handle starts a resize; press on empty
    canvas clears the selection.
    """

    selectionChanged = Signal(str)  # "" when nothing is selected
    layoutCommitted = Signal()

    def __init__(
        self,
        items: Layout | Iterable[GridItem],
        config: Optional[GridConfig] = None,
        parent=None,
    ):
        super().__init__(parent)
        self.controller = InteractionController(
            items,
            container_size=lambda: (self.width(), self.height()),
            config=config,
        )
        self._press_pos: Optional[QPointF] = None
        self._start_size = (0, 0)

        self.setMouseTracking(True)
        self.setMinimumSize(self.controller.config.cell_pixels, self.controller.config.cell_pixels)

    def sizeHint(self):
        cell = self.controller.config.cell_pixels
        return QSize(cell * 20, cell * 15)

    # ─────────────────────────────────────────────────────────────────────────
    # Geometry helpers
    # ─────────────────────────────────────────────────────────────────────────

    def item_rect(self, item: GridItem) -> QRectF:
        """Pixel rectangle of an item on the canvas."""
        cell = self.controller.config.cell_pixels
        return QRectF(
            cell_to_pixel(item.x, cell),
            cell_to_pixel(item.y, cell),
            cell_to_pixel(item.w, cell),
            cell_to_pixel(item.h, cell),
        )

    def handle_rect(self, item: GridItem) -> QRectF:
        """Resize handle in the item's bottom-right corner."""
        rect = self.item_rect(item)
        return QRectF(
            rect.right() - HANDLE_SIZE,
            rect.bottom() - HANDLE_SIZE,
            HANDLE_SIZE,
            HANDLE_SIZE,
        )

    def item_at(self, pos: QPointF) -> Optional[GridItem]:
        """Item under a canvas position, or None."""
        for item in reversed(self.controller.display_layout.sorted_items()):
            if self.item_rect(item).contains(pos):
                return item
        return None

    # ─────────────────────────────────────────────────────────────────────────
    # Mouse handling
    # ─────────────────────────────────────────────────────────────────────────

    def mousePressEvent(self, event):
        if event.button() != Qt.MouseButton.LeftButton:
            return super().mousePressEvent(event)

        pos = event.position()
        controller = self.controller
        if controller.state.is_gesture:
            # Release was lost (e.g. outside the window)
            controller.cancel()
        selected_id = controller.selected_id
        selected = controller.committed_layout.get(selected_id) if selected_id else None

        if selected is not None and self.handle_rect(selected).contains(pos):
            controller.begin_resize()
            self._press_pos = pos
            self._start_size = (self.item_rect(selected).width(), self.item_rect(selected).height())
        else:
            hit = self.item_at(pos)
            if hit is None:
                if selected_id is not None:
                    controller.clear_selection()
                    self.selectionChanged.emit("")
            elif hit.id == selected_id:
                controller.begin_drag()
                self._press_pos = pos
            else:
                controller.select(hit.id)
                self.selectionChanged.emit(hit.id)
        self.update()

    def mouseMoveEvent(self, event):
        if self._press_pos is None or not self.controller.state.is_gesture:
            return super().mouseMoveEvent(event)

        delta = event.position() - self._press_pos
        if self.controller.state is InteractionState.DRAGGING:
            result = self.controller.update_drag(delta.x(), delta.y())
        else:
            width, height = self._start_size
            result = self.controller.update_resize(width + delta.x(), height + delta.y())
        if result is None:
            logger.debug("Gesture aborted; showing committed layout")
            self._press_pos = None
        self.update()

    def mouseReleaseEvent(self, event):
        if self._press_pos is None or not self.controller.state.is_gesture:
            self._press_pos = None
            return super().mouseReleaseEvent(event)

        delta = event.position() - self._press_pos
        self._press_pos = None
        if self.controller.state is InteractionState.DRAGGING:
            result = self.controller.end_drag(delta.x(), delta.y())
        else:
            width, height = self._start_size
            result = self.controller.end_resize(width + delta.x(), height + delta.y())
        if result is not None:
            self.layoutCommitted.emit()
        self.update()

    # ─────────────────────────────────────────────────────────────────────────
    # Painting
    # ─────────────────────────────────────────────────────────────────────────

    def paintEvent(self, event):
        C = get_colors()
        config = self.controller.config
        painter = QPainter(self)
        painter.fillRect(self.rect(), QColor(C.BACKGROUND))

        # Grid lines: minor every cell, major drawn over them
        w, h = self.width(), self.height()
        for step, color in ((config.cell_pixels, C.GRID_MINOR), (config.major_pixels, C.GRID_MAJOR)):
            painter.setPen(QPen(QColor(color), 1))
            for x in range(0, w + 1, step):
                painter.drawLine(x, 0, x, h)
            for y in range(0, h + 1, step):
                painter.drawLine(0, y, w, y)

        fill = QColor(C.PREVIEW_FILL if self.controller.preview_layout is not None else C.ITEM_FILL)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        for item in self.controller.display_layout.sorted_items():
            rect = self.item_rect(item).adjusted(1, 1, -1, -1)
            painter.setPen(QPen(QColor(C.ITEM_BORDER), 1))
            painter.setBrush(fill)
            painter.drawRect(rect)
            painter.setPen(QColor(C.ITEM_TEXT))
            painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, item.id)

        selected_id = self.controller.selected_id
        if selected_id is not None:
            item = self.controller.display_layout[selected_id]
            painter.setBrush(Qt.BrushStyle.NoBrush)
            painter.setPen(QPen(QColor(C.SELECTION), 2))
            painter.drawRect(self.item_rect(item).adjusted(1, 1, -1, -1))
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(QColor(C.HANDLE))
            painter.drawRect(self.handle_rect(item))
        painter.end()

"""
Module: engine.controller

Purpose:
    Interaction state machine for selection and drag/resize gestures.
    Turns raw pixel measurements from a gesture provider into a preview
    layout on every tick, and into the committed layout on gesture end.

Key Classes:
    - InteractionState: IDLE / SELECTED / DRAGGING / RESIZING
    - InteractionController: The state machine

States:
    IDLE --select--> SELECTED --begin_drag/begin_resize--> DRAGGING/RESIZING
    DRAGGING/RESIZING --update_*--> (same, preview replaced)
    DRAGGING/RESIZING --end_*/cancel--> SELECTED
    SELECTED --clear_selection--> IDLE

Dependencies:
    - core.geometry: pixel_to_cell
    - core.models: GridItem, GridBounds, Layout
    - engine.resolver: resolve
    - engine.config: GridConfig

Used By:
    - gui.widgets.grid_canvas
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Iterable, List, Optional, Tuple

from snapgrid.core.geometry import pixel_to_cell
from snapgrid.core.models import GridBounds, GridItem, Layout

from .collision import all_overlaps, layout_violations
from .config import GridConfig
from .errors import InteractionError, ReflowDivergenceError, UnknownItemError
from .resolver import resolve

logger = logging.getLogger(__name__)

ContainerSize = Callable[[], Tuple[float, float]]


class InteractionState(Enum):
    """Phase of the current interaction."""
    IDLE = "idle"
    SELECTED = "selected"
    DRAGGING = "dragging"
    RESIZING = "resizing"

    @property
    def is_gesture(self) -> bool:
        return self in (InteractionState.DRAGGING, InteractionState.RESIZING)


class InteractionController:
    """
    Drives selection and drag/resize through preview-then-commit.

    The committed layout is replaced only on a successful commit, so
    anything observing `committed_layout` never sees a half-resolved
    state. During a gesture `preview_layout` holds the latest resolved
    proposal.

    Args:
        items: Initial layout (Layout or iterable of GridItems)
        container_size: Callable returning the container's current
            (width, height) in pixels; queried on every resolve
        config: Grid configuration

    Example:
        >>> controller = InteractionController(
        ...     [GridItem("A", 0, 0, 2, 2), GridItem("B", 4, 1, 1, 2)],
        ...     container_size=lambda: (300, 300),
        ... )
        >>> controller.select("A")
        >>> controller.begin_drag()
        >>> controller.end_drag(90, 30)["B"]
        GridItem('B', 4, 3, 1, 2)
    """

    def __init__(
        self,
        items: Layout | Iterable[GridItem],
        container_size: ContainerSize,
        config: Optional[GridConfig] = None,
    ) -> None:
        self.config = config or GridConfig()
        self._container_size = container_size
        self._committed = items if isinstance(items, Layout) else Layout.from_items(items)
        self._preview: Optional[Layout] = None
        self._state = InteractionState.IDLE
        self._selected_id: Optional[str] = None

        # Bounds are not checked here: the container may not be laid out yet
        for a_id, b_id in sorted(all_overlaps(self._committed)):
            logger.warning(f"Initial layout: {a_id} overlaps {b_id}")

    # ─────────────────────────────────────────────────────────────────────────
    # Exposed state
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def state(self) -> InteractionState:
        return self._state

    @property
    def selected_id(self) -> Optional[str]:
        return self._selected_id

    @property
    def committed_layout(self) -> Layout:
        """Authoritative layout; replaced only at commit."""
        return self._committed

    @property
    def preview_layout(self) -> Optional[Layout]:
        """Ephemeral layout of the active gesture, or None."""
        return self._preview

    @property
    def display_layout(self) -> Layout:
        """What a renderer should draw: the preview if any, else committed."""
        return self._preview if self._preview is not None else self._committed

    def bounds(self) -> GridBounds:
        """Current container bounds in cells (re-queried every call)."""
        width, height = self._container_size()
        return GridBounds.from_pixels(width, height, self.config.cell_pixels)

    def violations(self) -> List[str]:
        """Invariant violations of the committed layout against current bounds."""
        return layout_violations(self._committed, self.bounds())

    # ─────────────────────────────────────────────────────────────────────────
    # Selection
    # ─────────────────────────────────────────────────────────────────────────

    def select(self, item_id: str) -> None:
        """
        Select an item. An active gesture is cancelled first.

        Raises:
            UnknownItemError: If `item_id` is not in the committed layout
        """
        if item_id not in self._committed:
            raise UnknownItemError(f"No item with id {item_id!r}")
        if self._state.is_gesture:
            self.cancel()
        self._selected_id = item_id
        self._state = InteractionState.SELECTED

    def clear_selection(self) -> None:
        """Deselect (click outside any item). An active gesture is cancelled first."""
        if self._state.is_gesture:
            self.cancel()
        self._selected_id = None
        self._state = InteractionState.IDLE

    # ─────────────────────────────────────────────────────────────────────────
    # Gestures
    # ─────────────────────────────────────────────────────────────────────────

    def begin_drag(self) -> None:
        """Start dragging the selected item."""
        self._begin(InteractionState.DRAGGING)

    def begin_resize(self) -> None:
        """Start resizing the selected item."""
        self._begin(InteractionState.RESIZING)

    def update_drag(self, dx: float, dy: float) -> Optional[Layout]:
        """
        Drag tick.

        Args:
            dx: Horizontal pixel delta accumulated since the drag started
            dy: Vertical pixel delta accumulated since the drag started

        Returns:
            New preview layout, or None if the gesture was aborted
        """
        self._require(InteractionState.DRAGGING)
        return self._tick(self._dragged(dx, dy))

    def update_resize(self, width: float, height: float) -> Optional[Layout]:
        """
        Resize tick.

        Args:
            width: Item's current pixel width reported by the gesture
            height: Item's current pixel height reported by the gesture

        Returns:
            New preview layout, or None if the gesture was aborted
        """
        self._require(InteractionState.RESIZING)
        return self._tick(self._resized(width, height))

    def end_drag(self, dx: float, dy: float) -> Optional[Layout]:
        """Finish the drag and commit. Returns the committed layout, or None if aborted."""
        self._require(InteractionState.DRAGGING)
        return self._commit(self._dragged(dx, dy))

    def end_resize(self, width: float, height: float) -> Optional[Layout]:
        """Finish the resize and commit. Returns the committed layout, or None if aborted."""
        self._require(InteractionState.RESIZING)
        return self._commit(self._resized(width, height))

    def cancel(self) -> None:
        """Abandon the active gesture; the committed layout is unchanged."""
        if not self._state.is_gesture:
            return
        self._preview = None
        self._state = InteractionState.SELECTED

    # ─────────────────────────────────────────────────────────────────────────
    # Internals
    # ─────────────────────────────────────────────────────────────────────────

    def _begin(self, gesture: InteractionState) -> None:
        if self._state is not InteractionState.SELECTED:
            raise InteractionError(
                f"Cannot start {gesture.value} while {self._state.value}"
            )
        self._state = gesture
        self._preview = None

    def _require(self, gesture: InteractionState) -> None:
        if self._state is not gesture:
            raise InteractionError(
                f"Expected {gesture.value} gesture, state is {self._state.value}"
            )

    def _anchor(self) -> GridItem:
        return self._committed[self._selected_id]

    def _dragged(self, dx: float, dy: float) -> GridItem:
        cell = self.config.cell_pixels
        anchor = self._anchor()
        return anchor.moved_to(
            anchor.x + pixel_to_cell(dx, cell),
            anchor.y + pixel_to_cell(dy, cell),
        )

    def _resized(self, width: float, height: float) -> GridItem:
        cell = self.config.cell_pixels
        minimum = self.config.min_item_size
        return self._anchor().resized_to(
            max(minimum, pixel_to_cell(width, cell)),
            max(minimum, pixel_to_cell(height, cell)),
        )

    def _resolve(self, proposal: GridItem) -> Layout:
        return resolve(self._committed.with_item(proposal), proposal.id, self.bounds())

    def _unchanged(self, proposal: GridItem) -> bool:
        # A shrunk container still needs the clamp even for an unmoved item
        if proposal != self._anchor():
            return False
        bounds = self.bounds()
        return all(bounds.contains(item) for item in self._committed.values())

    def _tick(self, proposal: GridItem) -> Optional[Layout]:
        if self._unchanged(proposal):
            self._preview = self._committed
            return self._preview

        logger.debug(f"Tick {self._state.value} {proposal!r}")
        try:
            self._preview = self._resolve(proposal)
        except ReflowDivergenceError as e:
            self._abort(e)
            return None
        return self._preview

    def _commit(self, proposal: GridItem) -> Optional[Layout]:
        if self._unchanged(proposal):
            self._preview = None
            self._state = InteractionState.SELECTED
            return self._committed

        try:
            resolved = self._resolve(proposal)
        except ReflowDivergenceError as e:
            self._abort(e)
            return None

        logger.info(f"Committed {self._state.value} of {proposal.id!r}: {resolved[proposal.id]!r}")
        self._committed = resolved
        self._preview = None
        self._state = InteractionState.SELECTED
        return self._committed

    def _abort(self, error: ReflowDivergenceError) -> None:
        logger.warning(f"Aborting {self._state.value} of {self._selected_id!r}: {error}")
        self._preview = None
        self._state = InteractionState.SELECTED

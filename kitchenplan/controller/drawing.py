"""
controller/drawing.py - Wall drawing controller v1.0

Press on a segment or corner to start a stroke with the next wall type
(none -> wall -> counter -> none); every wall cell entered while the
button is held is painted with that type. Strokes are committed cell by
cell, so releasing or leaving the grid only ends the stroke.
"""

from __future__ import annotations
from typing import Optional
import logging

from kitchenplan.catalog.walls import WallType
from kitchenplan.layout.grid import CellKind, GridPosition, cell_kind
from kitchenplan.controller.events import (
    DrawingState,
    LayoutGetter,
    LayoutPublisher,
    PointerButton,
)

__all__ = [
    'DrawingController',
    'DRAWING_HELP',
]

logger = logging.getLogger("controller.drawing")

DRAWING_HELP = (
    "Click and drag to draw your floorplan; click again to indicate counters or delete."
)


class DrawingController:
    """
    State machine for the draw grid.

    Attributes:
        target: Wall type painted by the current stroke, None when idle
        last_wall: Last wall cell painted, used to fill skipped segments
    """

    def __init__(self, get_layout: LayoutGetter, publish: LayoutPublisher):
        self._get_layout = get_layout
        self._publish = publish

        self.target: Optional[WallType] = None
        self.last_wall: Optional[GridPosition] = None

    @property
    def state(self) -> DrawingState:
        return DrawingState.IDLE if self.target is None else DrawingState.DRAWING

    def reset(self) -> None:
        self.target = None
        self.last_wall = None

    def _paint(self, row: int, col: int) -> None:
        self.last_wall = (row, col)
        self._publish(self._get_layout().paint_wall(row, col, self.target))

    # -------------------------------------------------------------------------
    # Pointer input
    # -------------------------------------------------------------------------

    def pointer_down(self, row: int, col: int) -> None:
        """Start a stroke on a segment or corner cell."""
        kind = cell_kind(row, col)
        if kind is CellKind.ROOM:
            return

        current = self._get_layout().get_element(row, col)
        wall = current if kind is CellKind.SEGMENT else current.wall_type
        self.target = wall.cycle()
        logger.debug(f"Stroke started at ({row}, {col}) painting {self.target.value}")
        self._paint(row, col)

    def pointer_enter(self, row: int, col: int) -> None:
        """Pointer entered a cell; wall cells are painted while drawing."""
        if self.target is None or cell_kind(row, col) is CellKind.ROOM:
            return
        self._paint(row, col)

    def pointer_move(self, row: int, col: int) -> None:
        """
        Pointer moved inside a room cell.

        Fast pointer motion can skip the wall cell between the last painted
        cell and this room. When the room sits one step across from the last
        wall cell on one axis and two on the other, paint the skipped segment.
        """
        if self.target is None or self.last_wall is None:
            return
        if cell_kind(row, col) is not CellKind.ROOM:
            return

        last_row, last_col = self.last_wall
        d_row, d_col = abs(last_row - row), abs(last_col - col)
        if d_row == 1 and d_col == 2:
            self._paint(last_row, col)
        elif d_row == 2 and d_col == 1:
            self._paint(row, last_col)

    def pointer_up(self, button: int = PointerButton.PRIMARY) -> None:
        """End the stroke. Secondary button releases are ignored."""
        if button == PointerButton.SECONDARY:
            return
        self.reset()

    def pointer_leave(self) -> None:
        """Pointer left the drawable region; the stroke ends."""
        self.reset()

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def remove_walls(self) -> None:
        """Clear every wall segment; corners are re-derived."""
        self._publish(self._get_layout().remove_walls())

"""
controller/placement.py - Item placement and arrangement controller v1.0

Translates pointer, keyboard and palette drag input over room cells into
layout operations:

- primary press + release on an item selects it (press again to deselect)
- primary press, drag over another room cell, release swaps the two cells
- secondary press rotates the item clockwise
- rotate/delete actions and Backspace/Delete act on the selection
- a palette item dragged over a room cell replaces that cell on drop
"""

from __future__ import annotations
from typing import Optional, Tuple
import logging

from kitchenplan.catalog.items import EMPTY, Placement
from kitchenplan.layout.grid import CellKind, GridPosition, cell_kind
from kitchenplan.controller.events import (
    DELETE_KEYS,
    LayoutGetter,
    LayoutPublisher,
    PlacementState,
    PointerButton,
)

__all__ = [
    'PlacementController',
    'PLACEMENT_HELP',
    'PREVIEW_OPACITY',
]

logger = logging.getLogger("controller.placement")

PLACEMENT_HELP = "Left click to select or drag; right click to rotate."
PREVIEW_OPACITY = 0.7


class PlacementController:
    """
    State machine for the plan grid.

    Attributes:
        hovered_cell: Room cell under the pointer
        selected_cell: Room cell the rotate/delete actions apply to
        clicked_cell: Room cell pressed with the primary button, until release
        dragged_over_cell: Room cell entered while clicked_cell is held
        dragged_item: Palette item being dragged in from outside the grid
        dragged_position: Room cell the palette item is currently over
    """

    def __init__(self, get_layout: LayoutGetter, publish: LayoutPublisher):
        self._get_layout = get_layout
        self._publish = publish

        self.hovered_cell: Optional[GridPosition] = None
        self.selected_cell: Optional[GridPosition] = None
        self.clicked_cell: Optional[GridPosition] = None
        self.dragged_over_cell: Optional[GridPosition] = None

        self.dragged_item: Optional[Placement] = None
        self.dragged_position: Optional[GridPosition] = None

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def state(self) -> PlacementState:
        if self.clicked_cell is not None and self.dragged_over_cell is not None:
            return PlacementState.DRAGGING_OVER
        if self.clicked_cell is not None:
            return PlacementState.CLICKED
        if self.selected_cell is not None:
            return PlacementState.SELECTED
        if self.hovered_cell is not None:
            return PlacementState.HOVERING
        return PlacementState.IDLE

    @property
    def can_rotate(self) -> bool:
        return self.selected_cell is not None

    @property
    def can_delete(self) -> bool:
        return self.selected_cell is not None

    @property
    def can_remove_all(self) -> bool:
        return len(self._get_layout().elements) > 0

    def reset(self) -> None:
        """Drop all transient and selection state."""
        self.hovered_cell = None
        self.selected_cell = None
        self.clicked_cell = None
        self.dragged_over_cell = None
        self.dragged_item = None
        self.dragged_position = None

    def _occupant(self, position: GridPosition) -> Placement:
        return self._get_layout().get_element(*position)

    # -------------------------------------------------------------------------
    # Pointer input
    # -------------------------------------------------------------------------

    def pointer_down(self, row: int, col: int, button: int = PointerButton.PRIMARY) -> None:
        """
        Press on a room cell.

        Only occupied cells can be grabbed or rotated; presses on empty
        cells and on wall cells are ignored.
        """
        if cell_kind(row, col) is not CellKind.ROOM:
            return
        if self._occupant((row, col)).is_empty:
            return

        if button == PointerButton.PRIMARY and self.clicked_cell is None:
            self.clicked_cell = (row, col)
            logger.debug(f"Clicked {self.clicked_cell}")
        elif button == PointerButton.SECONDARY:
            self._publish(self._get_layout().rotate_element_right(row, col))
            logger.debug(f"Rotated ({row}, {col}) clockwise")

    def pointer_enter(self, row: int, col: int) -> None:
        """Pointer moved into a room cell."""
        if cell_kind(row, col) is not CellKind.ROOM:
            return
        if self.clicked_cell is not None:
            self.dragged_over_cell = (row, col)
        self.hovered_cell = (row, col)

    def pointer_leave(self) -> None:
        """Pointer left the hovered cell."""
        self.hovered_cell = None

    def pointer_up(self, button: int = PointerButton.PRIMARY) -> None:
        """Release anywhere over the grid."""
        if button == PointerButton.SECONDARY:
            return

        if self.clicked_cell is not None and self.dragged_over_cell is not None:
            (r1, c1), (r2, c2) = self.clicked_cell, self.dragged_over_cell
            self.selected_cell = None
            self._publish(self._get_layout().swap_elements(r1, c1, r2, c2))
            logger.debug(f"Swapped ({r1}, {c1}) and ({r2}, {c2})")
        elif self.clicked_cell is not None and self.clicked_cell != self.selected_cell:
            self.selected_cell = self.clicked_cell
        else:
            self.selected_cell = None

        self.clicked_cell = None
        self.dragged_over_cell = None

    # -------------------------------------------------------------------------
    # Selection actions
    # -------------------------------------------------------------------------

    def delete(self) -> None:
        if self.selected_cell is None:
            return
        row, col = self.selected_cell
        self.selected_cell = None
        self._publish(self._get_layout().set_element(row, col, EMPTY))

    def rotate_left(self) -> None:
        if self.selected_cell is None:
            return
        self._publish(self._get_layout().rotate_element_left(*self.selected_cell))

    def rotate_right(self) -> None:
        if self.selected_cell is None:
            return
        self._publish(self._get_layout().rotate_element_right(*self.selected_cell))

    def remove_all(self) -> None:
        """Empty every room cell."""
        if not self.can_remove_all:
            return
        self.selected_cell = None
        self._publish(self._get_layout().remove_squares())

    def key_down(self, key: str, text_input_in_focus: bool = False) -> bool:
        """
        Keyboard input. Backspace/Delete remove the selected item unless a
        text field elsewhere has focus.

        Returns:
            True if the key was handled
        """
        if text_input_in_focus or key not in DELETE_KEYS or self.selected_cell is None:
            return False
        self.delete()
        return True

    # -------------------------------------------------------------------------
    # Palette drag source
    # -------------------------------------------------------------------------

    def start_drag(self, item: Placement) -> None:
        """A palette item started being dragged toward the grid."""
        self.dragged_item = item
        self.dragged_position = None

    def drag_over(self, row: int, col: int, item: Optional[Placement] = None) -> None:
        """Palette drag is over a room cell."""
        if cell_kind(row, col) is not CellKind.ROOM:
            return
        if item is not None:
            self.dragged_item = item
        self.dragged_position = (row, col)

    def drag_away(self) -> None:
        """Palette drag left the grid; nothing is placed."""
        self.dragged_position = None

    def drop(self) -> None:
        """Place the dragged item, replacing whatever occupied the cell."""
        item, position = self.dragged_item, self.dragged_position
        self.dragged_item = None
        self.dragged_position = None
        if item is None or position is None:
            return
        self._publish(self._get_layout().set_element(position[0], position[1], item))
        logger.debug(f"Dropped {item} at {position}")

    def cancel_drag(self) -> None:
        """Palette drag ended without a drop."""
        self.dragged_item = None
        self.dragged_position = None

    # -------------------------------------------------------------------------
    # Derived view state
    # -------------------------------------------------------------------------

    def cursor_text(self) -> str:
        """Status line describing what the current gesture will do."""
        if self.dragged_item is not None and self.dragged_position is not None:
            existing = self._occupant(self.dragged_position)
            if not existing.is_empty:
                return f"Replace {existing.label} with {self.dragged_item.label}"
            return f"Add {self.dragged_item.label}"

        if self.clicked_cell is not None and self.dragged_over_cell is not None:
            clicked = self._occupant(self.clicked_cell)
            over = self._occupant(self.dragged_over_cell)
            if over.is_empty:
                return f"Move {clicked.label}"
            return f"Swap {clicked.label} and {over.label}"

        if self.hovered_cell is not None:
            hovered = self._occupant(self.hovered_cell)
            if not hovered.is_empty:
                return hovered.label

        if self.selected_cell is not None:
            return f"Selected {self._occupant(self.selected_cell).label}"

        return PLACEMENT_HELP

    def preview(self, row: int, col: int) -> Tuple[Placement, float]:
        """
        What a renderer should show in a room cell right now.

        While dragging, the clicked and dragged-over cells show each other's
        occupant, and a palette item shows where it would land.

        Returns:
            Tuple of (placement, opacity)
        """
        placement = self._occupant((row, col))
        opacity = 1.0

        if self.dragged_over_cell is not None and self.clicked_cell is not None:
            if self.dragged_over_cell == (row, col):
                placement = self._occupant(self.clicked_cell)
                opacity = PREVIEW_OPACITY
            elif self.clicked_cell == (row, col):
                placement = self._occupant(self.dragged_over_cell)
                opacity = PREVIEW_OPACITY

        if self.dragged_item is not None and self.dragged_position == (row, col):
            placement = self.dragged_item
            opacity = PREVIEW_OPACITY

        return placement, opacity

"""
controller/events.py - Input vocabulary shared by the grid controllers
"""

from __future__ import annotations
from typing import Callable
from enum import Enum, IntEnum

from kitchenplan.layout.grid import Layout

__all__ = [
    'PointerButton',
    'DELETE_KEYS',
    'PlacementState',
    'DrawingState',
    'LayoutGetter',
    'LayoutPublisher',
]


class PointerButton(IntEnum):
    """Mouse button numbers as reported by pointer events."""

    PRIMARY = 0
    AUXILIARY = 1
    SECONDARY = 2


# Keys that delete the selected item
DELETE_KEYS = frozenset({"Backspace", "Delete"})


class PlacementState(Enum):
    """States of the item placement/arrangement controller."""

    IDLE = "idle"
    HOVERING = "hovering"
    CLICKED = "clicked"
    DRAGGING_OVER = "dragging_over"
    SELECTED = "selected"


class DrawingState(Enum):
    """States of the wall drawing controller."""

    IDLE = "idle"
    DRAWING = "drawing"


# Controllers read the current layout and hand back replacements; they never
# mutate a layout in place.
LayoutGetter = Callable[[], Layout]
LayoutPublisher = Callable[[Layout], None]

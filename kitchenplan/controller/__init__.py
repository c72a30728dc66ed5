"""
controller - Pointer and keyboard state machines for the layout grids.

Provides:
- PlacementController: select, swap, rotate, delete and palette drops
- DrawingController: drag-painting of wall segments
"""

from kitchenplan.controller.events import (
    PointerButton,
    DELETE_KEYS,
    PlacementState,
    DrawingState,
    LayoutGetter,
    LayoutPublisher,
)
from kitchenplan.controller.placement import (
    PlacementController,
    PLACEMENT_HELP,
    PREVIEW_OPACITY,
)
from kitchenplan.controller.drawing import (
    DrawingController,
    DRAWING_HELP,
)

__all__ = [
    'PointerButton',
    'DELETE_KEYS',
    'PlacementState',
    'DrawingState',
    'LayoutGetter',
    'LayoutPublisher',
    'PlacementController',
    'PLACEMENT_HELP',
    'PREVIEW_OPACITY',
    'DrawingController',
    'DRAWING_HELP',
]

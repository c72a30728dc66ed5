"""
operations.py - Named layout operations

Maps operation names used by the CLI and the REST API onto Layout methods.
"""

from typing import Any, Callable, Dict, List, Optional
import logging

from kitchenplan.catalog.items import EMPTY, Orientation, Placement, item_by_slug
from kitchenplan.catalog.walls import WallType
from kitchenplan.errors.taxonomy import ErrorCode, KitchenPlanError, ErrorCategory, ErrorSeverity
from kitchenplan.layout.grid import Layout

__all__ = [
    'OPERATIONS',
    'UnknownOperationError',
    'apply_operation',
    'operation_names',
]

logger = logging.getLogger(__name__)


class UnknownOperationError(KeyError):
    """Operation name is not registered."""

    def __init__(self, name: str):
        super().__init__(name)
        self.error = KitchenPlanError(
            code=ErrorCode.INP_UNKNOWN_OPERATION,
            category=ErrorCategory.INPUT,
            severity=ErrorSeverity.ERROR,
            message=f"Unknown operation: {name}",
            source="layout.operations",
            actual_value=name,
            expected_value=operation_names(),
        )


def _require(params: Dict[str, Any], *names: str) -> List[Any]:
    missing = [n for n in names if params.get(n) is None]
    if missing:
        raise ValueError(f"Missing parameter(s): {', '.join(missing)}")
    return [params[n] for n in names]


def _place(layout: Layout, params: Dict[str, Any]) -> Layout:
    row, col, item = _require(params, "row", "col", "item")
    orientation = Orientation(int(params.get("orientation") or 0))
    return layout.set_element(row, col, Placement(item_by_slug(item), orientation))


def _clear(layout: Layout, params: Dict[str, Any]) -> Layout:
    row, col = _require(params, "row", "col")
    return layout.set_element(row, col, EMPTY)


def _rotate_left(layout: Layout, params: Dict[str, Any]) -> Layout:
    return layout.rotate_element_left(*_require(params, "row", "col"))


def _rotate_right(layout: Layout, params: Dict[str, Any]) -> Layout:
    return layout.rotate_element_right(*_require(params, "row", "col"))


def _swap(layout: Layout, params: Dict[str, Any]) -> Layout:
    return layout.swap_elements(*_require(params, "row", "col", "row2", "col2"))


def _wall(layout: Layout, params: Dict[str, Any]) -> Layout:
    row, col, wall = _require(params, "row", "col", "wall")
    return layout.paint_wall(row, col, WallType(wall))


OPERATIONS: Dict[str, Callable[[Layout, Dict[str, Any]], Layout]] = {
    "place": _place,
    "clear": _clear,
    "rotate_left": _rotate_left,
    "rotate_right": _rotate_right,
    "swap": _swap,
    "wall": _wall,
    "remove_squares": lambda layout, params: layout.remove_squares(),
    "remove_walls": lambda layout, params: layout.remove_walls(),
}


def operation_names() -> List[str]:
    return sorted(OPERATIONS)


def apply_operation(layout: Layout, name: str, params: Optional[Dict[str, Any]] = None) -> Layout:
    """
    Apply a named operation and return the resulting layout.

    Raises:
        UnknownOperationError: Unregistered operation name
        ValueError: Missing parameter or bad enum value
        KeyError: Unknown item slug
        CellRangeError / CellCategoryError: Invalid target cell
    """
    handler = OPERATIONS.get(name)
    if handler is None:
        raise UnknownOperationError(name)
    logger.debug(f"Applying {name} with {params}")
    return handler(layout, params or {})

"""
catalog/walls.py - Wall segment and corner variants v1.0

Segment cells hold a WallType. Corner cells hold a CornerShape that is
always derived from the four segments meeting at the corner.
"""

from __future__ import annotations
from typing import Dict, Tuple
from enum import Enum

__all__ = [
    'WallType',
    'CornerShape',
    'CORNER_SHAPES',
    'corner_shape_for',
]


class WallType(Enum):
    """Content of a segment cell."""

    NONE = "none"
    WALL = "wall"
    COUNTER = "counter"

    @property
    def code(self) -> int:
        """Stable base-3 digit used by the token codec."""
        return _WALL_CODES[self]

    @property
    def is_present(self) -> bool:
        return self is not WallType.NONE

    @property
    def class_name(self) -> str:
        """Style class stem; renderers append '-plan' or '-draw'."""
        if self is WallType.NONE:
            return "wall-none"
        return self.value

    def cycle(self) -> "WallType":
        """none -> wall -> counter -> none."""
        return _WALL_CYCLE[self]

    @classmethod
    def from_code(cls, code: int) -> "WallType":
        return _WALLS_BY_CODE[code]


_WALL_CODES: Dict[WallType, int] = {
    WallType.NONE: 0,
    WallType.WALL: 1,
    WallType.COUNTER: 2,
}
_WALLS_BY_CODE: Dict[int, WallType] = {v: k for k, v in _WALL_CODES.items()}
_WALL_CYCLE: Dict[WallType, WallType] = {
    WallType.NONE: WallType.WALL,
    WallType.WALL: WallType.COUNTER,
    WallType.COUNTER: WallType.NONE,
}


class CornerShape(Enum):
    """Shape drawn in a corner cell."""

    NONE = "none"
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"

    # L shapes, named by the two arms
    L_UP_LEFT = "l_up_left"
    L_UP_RIGHT = "l_up_right"
    L_DOWN_LEFT = "l_down_left"
    L_DOWN_RIGHT = "l_down_right"

    # T shapes, named by the missing arm
    T_NO_UP = "t_no_up"
    T_NO_LEFT = "t_no_left"
    T_NO_RIGHT = "t_no_right"
    T_NO_DOWN = "t_no_down"

    CROSS = "cross"

    @property
    def class_name(self) -> str:
        return f"corner-{self.value.replace('_', '-')}"

    @property
    def wall_type(self) -> WallType:
        """Wall variant a drawing stroke cycles from when started on this corner."""
        if self is CornerShape.NONE:
            return WallType.NONE
        return WallType.WALL


# (up, left, right, down) -> shape. A lone arm renders as a straight run.
CORNER_SHAPES: Dict[Tuple[bool, bool, bool, bool], CornerShape] = {
    (False, False, False, False): CornerShape.NONE,
    (True, False, False, False): CornerShape.VERTICAL,
    (False, False, False, True): CornerShape.VERTICAL,
    (True, False, False, True): CornerShape.VERTICAL,
    (False, True, False, False): CornerShape.HORIZONTAL,
    (False, False, True, False): CornerShape.HORIZONTAL,
    (False, True, True, False): CornerShape.HORIZONTAL,
    (True, True, False, False): CornerShape.L_UP_LEFT,
    (True, False, True, False): CornerShape.L_UP_RIGHT,
    (False, True, False, True): CornerShape.L_DOWN_LEFT,
    (False, False, True, True): CornerShape.L_DOWN_RIGHT,
    (False, True, True, True): CornerShape.T_NO_UP,
    (True, False, True, True): CornerShape.T_NO_LEFT,
    (True, True, False, True): CornerShape.T_NO_RIGHT,
    (True, True, True, False): CornerShape.T_NO_DOWN,
    (True, True, True, True): CornerShape.CROSS,
}


def corner_shape_for(up: bool, left: bool, right: bool, down: bool) -> CornerShape:
    """Corner shape for the presence of its four neighbouring segments."""
    return CORNER_SHAPES[(bool(up), bool(left), bool(right), bool(down))]

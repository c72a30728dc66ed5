"""
grid.py - Kitchen layout grid v1.0

A layout of width x height rooms is stored as a (2*height-1) x (2*width-1)
grid. Even/even cells are rooms, cells with exactly one odd index are wall
segments, odd/odd cells are corners.

Every operation returns a new Layout; a Layout handed to a caller is never
mutated again.
"""

from dataclasses import dataclass
from typing import List, Dict, Tuple, Optional, Any, Iterator, Union
from enum import Enum
import logging

from kitchenplan.catalog.items import Placement, EMPTY
from kitchenplan.catalog.walls import WallType, CornerShape, corner_shape_for
from kitchenplan.errors.taxonomy import (
    ErrorCode,
    CellRangeError,
    CellCategoryError,
    create_layout_error,
)

__all__ = [
    'CellKind',
    'Cell',
    'GridPosition',
    'Dimensions',
    'Layout',
    'cell_kind',
]

logger = logging.getLogger(__name__)

Cell = Union[Placement, WallType, CornerShape]
GridPosition = Tuple[int, int]


# =============================================================================
# CELL CATEGORIES
# =============================================================================

class CellKind(Enum):
    """Parity category of a grid cell."""

    ROOM = "room"
    SEGMENT = "segment"
    CORNER = "corner"

    @property
    def value_type(self) -> type:
        return _VALUE_TYPES[self]


_VALUE_TYPES = {
    CellKind.ROOM: Placement,
    CellKind.SEGMENT: WallType,
    CellKind.CORNER: CornerShape,
}


def cell_kind(row: int, col: int) -> CellKind:
    """Category of the cell at (row, col), from index parity."""
    row_odd = row % 2 == 1
    col_odd = col % 2 == 1
    if row_odd and col_odd:
        return CellKind.CORNER
    if row_odd or col_odd:
        return CellKind.SEGMENT
    return CellKind.ROOM


# =============================================================================
# DIMENSIONS
# =============================================================================

@dataclass(frozen=True)
class Dimensions:
    """Layout size in rooms."""

    width: int
    height: int

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Layout dimensions must be positive, got {self.width}x{self.height}")

    @property
    def rows(self) -> int:
        return 2 * self.height - 1

    @property
    def cols(self) -> int:
        return 2 * self.width - 1

    def to_dict(self) -> Dict[str, int]:
        return {"width": self.width, "height": self.height}


# =============================================================================
# LAYOUT
# =============================================================================

class Layout:
    """
    Kitchen floorplan on a room/segment/corner grid.

    Attributes:
        dimensions: Size in rooms
        elements: Positions of room cells holding an item (derived)
    """

    def __init__(self, dimensions: Dimensions, grid: Optional[List[List[Cell]]] = None):
        self.dimensions = dimensions
        if grid is None:
            grid = self.blank_grid(dimensions)
        elif len(grid) != dimensions.rows or any(len(row) != dimensions.cols for row in grid):
            raise ValueError(
                f"Grid shape does not match {dimensions.width}x{dimensions.height} rooms"
            )
        self._grid = grid

    @classmethod
    def empty(cls, width: int, height: int) -> "Layout":
        """Layout with no items and no walls."""
        return cls(Dimensions(width, height))

    @staticmethod
    def blank_grid(dimensions: Dimensions) -> List[List[Cell]]:
        grid = []
        for i in range(dimensions.rows):
            row = []
            for j in range(dimensions.cols):
                kind = cell_kind(i, j)
                if kind is CellKind.ROOM:
                    row.append(EMPTY)
                elif kind is CellKind.SEGMENT:
                    row.append(WallType.NONE)
                else:
                    row.append(CornerShape.NONE)
            grid.append(row)
        return grid

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def width(self) -> int:
        return self.dimensions.width

    @property
    def height(self) -> int:
        return self.dimensions.height

    @property
    def rows(self) -> int:
        return self.dimensions.rows

    @property
    def cols(self) -> int:
        return self.dimensions.cols

    @property
    def elements(self) -> List[GridPosition]:
        """Room cells currently holding an item, row-major."""
        return [pos for pos, placement in self.iter_rooms() if not placement.is_empty]

    @property
    def item_count(self) -> int:
        return len(self.elements)

    @property
    def is_blank(self) -> bool:
        """True when there are no items and no walls."""
        return not self.elements and not any(
            wall.is_present for _, wall in self.iter_segments()
        )

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _check_range(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise CellRangeError(create_layout_error(
                ErrorCode.LAY_OUT_OF_RANGE,
                f"Cell ({row}, {col}) outside {self.rows}x{self.cols} grid",
                actual=(row, col),
                expected=(self.rows, self.cols),
            ))

    def _check_kind(self, row: int, col: int, expected: CellKind) -> None:
        actual = cell_kind(row, col)
        if actual is not expected:
            raise CellCategoryError(create_layout_error(
                ErrorCode.LAY_CATEGORY_MISMATCH,
                f"Cell ({row}, {col}) is a {actual.value} cell, expected {expected.value}",
                actual=actual.value,
                expected=expected.value,
            ))

    def get_element(self, row: int, col: int) -> Cell:
        self._check_range(row, col)
        return self._grid[row][col]

    def __getitem__(self, position: GridPosition) -> Cell:
        return self.get_element(*position)

    def iter_cells(self) -> Iterator[Tuple[GridPosition, Cell]]:
        for i, row in enumerate(self._grid):
            for j, value in enumerate(row):
                yield (i, j), value

    def iter_rooms(self) -> Iterator[Tuple[GridPosition, Placement]]:
        for i in range(0, self.rows, 2):
            for j in range(0, self.cols, 2):
                yield (i, j), self._grid[i][j]

    def iter_segments(self) -> Iterator[Tuple[GridPosition, WallType]]:
        for i in range(self.rows):
            for j in range((i + 1) % 2, self.cols, 2):
                yield (i, j), self._grid[i][j]

    def iter_corners(self) -> Iterator[Tuple[GridPosition, CornerShape]]:
        for i in range(1, self.rows, 2):
            for j in range(1, self.cols, 2):
                yield (i, j), self._grid[i][j]

    # -------------------------------------------------------------------------
    # Copy and equality
    # -------------------------------------------------------------------------

    def clone(self) -> "Layout":
        """Independent copy. Cell values are immutable, so copying rows suffices."""
        return Layout(self.dimensions, [list(row) for row in self._grid])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Layout):
            return NotImplemented
        return self.dimensions == other.dimensions and self._grid == other._grid

    def __repr__(self) -> str:
        return f"Layout({self.width}x{self.height}, items={self.item_count})"

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def set_element(self, row: int, col: int, value: Cell) -> "Layout":
        """
        Replace the content of one cell.

        The value's type must match the cell category. Corners touched by
        the edit are re-derived, so the result is always consistent.
        """
        self._check_range(row, col)
        kind = cell_kind(row, col)
        if not isinstance(value, kind.value_type):
            raise CellCategoryError(create_layout_error(
                ErrorCode.LAY_CATEGORY_MISMATCH,
                f"Cannot put {type(value).__name__} in {kind.value} cell ({row}, {col})",
                actual=type(value).__name__,
                expected=kind.value_type.__name__,
            ))

        result = self.clone()
        result._grid[row][col] = value
        if kind is CellKind.SEGMENT:
            result._fix_corners_around(row, col)
        elif kind is CellKind.CORNER:
            result._fix_corner(row, col)
        logger.debug(f"set_element ({row}, {col}) = {value}")
        return result

    def rotate_element_right(self, row: int, col: int) -> "Layout":
        """Turn a room cell's item +90 degrees. Empty cells are unchanged."""
        return self._rotate(row, col, clockwise=True)

    def rotate_element_left(self, row: int, col: int) -> "Layout":
        """Turn a room cell's item -90 degrees. Empty cells are unchanged."""
        return self._rotate(row, col, clockwise=False)

    def _rotate(self, row: int, col: int, clockwise: bool) -> "Layout":
        self._check_range(row, col)
        self._check_kind(row, col, CellKind.ROOM)
        result = self.clone()
        placement = result._grid[row][col]
        result._grid[row][col] = placement.rotate_right() if clockwise else placement.rotate_left()
        return result

    def swap_elements(self, row1: int, col1: int, row2: int, col2: int) -> "Layout":
        """Exchange two room cells, orientation included. Either may be empty."""
        for r, c in ((row1, col1), (row2, col2)):
            self._check_range(r, c)
            self._check_kind(r, c, CellKind.ROOM)
        result = self.clone()
        if (row1, col1) != (row2, col2):
            grid = result._grid
            grid[row1][col1], grid[row2][col2] = grid[row2][col2], grid[row1][col1]
        return result

    def remove_squares(self) -> "Layout":
        """Empty every room cell; walls are untouched."""
        result = self.clone()
        for (i, j), _ in self.iter_rooms():
            result._grid[i][j] = EMPTY
        return result

    def remove_walls(self) -> "Layout":
        """Clear every segment, then re-derive corners."""
        result = self.clone()
        for (i, j), _ in self.iter_segments():
            result._grid[i][j] = WallType.NONE
        result._fix_all_corners()
        return result

    def fix_corner_walls(self) -> "Layout":
        """Re-derive every corner from its neighbouring segments."""
        result = self.clone()
        result._fix_all_corners()
        return result

    def paint_wall(self, row: int, col: int, wall_type: WallType) -> "Layout":
        """
        Apply a drawing stroke to a segment or corner cell.

        Segments take the wall type. Corners are derived content, so painting
        one only re-derives the corner shapes.
        """
        self._check_range(row, col)
        kind = cell_kind(row, col)
        if kind is CellKind.SEGMENT:
            return self.set_element(row, col, wall_type)
        if kind is CellKind.CORNER:
            return self.fix_corner_walls()
        raise CellCategoryError(create_layout_error(
            ErrorCode.LAY_CATEGORY_MISMATCH,
            f"Cannot draw a wall on room cell ({row}, {col})",
            actual=kind.value,
            expected="segment or corner",
        ))

    # -------------------------------------------------------------------------
    # Corner derivation
    # -------------------------------------------------------------------------

    def expected_corner(self, row: int, col: int) -> CornerShape:
        """Shape the corner at (row, col) must have given its segments."""
        grid = self._grid
        return corner_shape_for(
            grid[row - 1][col].is_present,
            grid[row][col - 1].is_present,
            grid[row][col + 1].is_present,
            grid[row + 1][col].is_present,
        )

    def corners_consistent(self) -> bool:
        return all(shape is self.expected_corner(i, j) for (i, j), shape in self.iter_corners())

    def _fix_corner(self, row: int, col: int) -> None:
        self._grid[row][col] = self.expected_corner(row, col)

    def _fix_corners_around(self, row: int, col: int) -> None:
        for r, c in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)):
            if self.in_bounds(r, c) and cell_kind(r, c) is CellKind.CORNER:
                self._fix_corner(r, c)

    def _fix_all_corners(self) -> None:
        for (i, j), _ in self.iter_corners():
            self._fix_corner(i, j)

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Sparse JSON view: only occupied rooms, present walls and drawn corners."""
        return {
            "width": self.width,
            "height": self.height,
            "rows": self.rows,
            "cols": self.cols,
            "item_count": self.item_count,
            "rooms": [
                {"row": i, "col": j, **placement.to_dict()}
                for (i, j), placement in self.iter_rooms()
                if not placement.is_empty
            ],
            "walls": [
                {"row": i, "col": j, "type": wall.value}
                for (i, j), wall in self.iter_segments()
                if wall.is_present
            ],
            "corners": [
                {"row": i, "col": j, "shape": shape.value}
                for (i, j), shape in self.iter_corners()
                if shape is not CornerShape.NONE
            ],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Layout":
        """Build from the sparse view. Corners are re-derived, never trusted."""
        layout = cls.empty(data["width"], data["height"])
        for room in data.get("rooms", []):
            layout._check_range(room["row"], room["col"])
            layout._check_kind(room["row"], room["col"], CellKind.ROOM)
            layout._grid[room["row"]][room["col"]] = Placement.from_dict(room)
        for wall in data.get("walls", []):
            layout._check_range(wall["row"], wall["col"])
            layout._check_kind(wall["row"], wall["col"], CellKind.SEGMENT)
            layout._grid[wall["row"]][wall["col"]] = WallType(wall["type"])
        layout._fix_all_corners()
        return layout

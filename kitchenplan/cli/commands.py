"""
cli/commands.py - CLI command implementations v1.0

Cell arguments are grid indices: rooms sit at even/even positions, wall
segments where exactly one index is odd.
"""

from __future__ import annotations
from typing import Any, Dict, List
import argparse

from .core import CLICommand, CLIContext, CommandResult, OutputFormat
from kitchenplan.catalog.items import placeable_items
from kitchenplan.catalog.walls import CornerShape, WallType
from kitchenplan.errors.taxonomy import KitchenPlanException
from kitchenplan.layout.grid import CellKind, Layout, cell_kind
from kitchenplan.layout.operations import apply_operation

__all__ = [
    'NewCommand',
    'ShowCommand',
    'PlaceCommand',
    'RotateCommand',
    'SwapCommand',
    'ClearCommand',
    'WallCommand',
    'ClearWallsCommand',
    'CatalogCommand',
    'DEFAULT_COMMANDS',
    'render_text',
]

# Errors a command reports instead of raising
COMMAND_ERRORS = (KitchenPlanException, KeyError, ValueError)


def _add_token_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--token", "-t",
        default=None,
        help="Layout token (defaults to an empty layout)",
    )


def _add_cell_arguments(parser: argparse.ArgumentParser, suffix: str = "") -> None:
    parser.add_argument(f"row{suffix}", type=int, help="Grid row index")
    parser.add_argument(f"col{suffix}", type=int, help="Grid column index")


def _failure(e: Exception) -> CommandResult:
    message = e.args[0] if isinstance(e, KeyError) and e.args else str(e)
    return CommandResult(success=False, error=str(message), exit_code=1)


# =============================================================================
# TEXT RENDERING
# =============================================================================

_VERTICAL_WALLS = {WallType.NONE: " ", WallType.WALL: "|", WallType.COUNTER: ":"}
_HORIZONTAL_WALLS = {WallType.NONE: " ", WallType.WALL: "-", WallType.COUNTER: "="}


def render_text(layout: Layout) -> str:
    """
    Plain-text picture of a layout.

    Items show as the first letter of their label, empty rooms as '.',
    drawn corners as '+'.
    """
    lines = []
    for i in range(layout.rows):
        chars = []
        for j in range(layout.cols):
            value = layout.get_element(i, j)
            kind = cell_kind(i, j)
            if kind is CellKind.ROOM:
                chars.append("." if value.is_empty else value.label[0].upper())
            elif kind is CellKind.CORNER:
                chars.append(" " if value is CornerShape.NONE else "+")
            elif i % 2 == 0:
                chars.append(_VERTICAL_WALLS[value])
            else:
                chars.append(_HORIZONTAL_WALLS[value])
        lines.append("".join(chars).rstrip())
    return "\n".join(lines)


# =============================================================================
# LAYOUT COMMANDS
# =============================================================================

class NewCommand(CLICommand):
    """Create an empty layout."""

    name = "new"
    description = "Create an empty layout"
    aliases = ["create"]

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("--width", "-W", type=int, default=None, help="Rooms per row")
        parser.add_argument("--height", "-H", type=int, default=None, help="Rooms per column")

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        width = args.width or ctx.config.grid.default_width
        height = args.height or ctx.config.grid.default_height
        limit = ctx.config.grid.max_dimension
        if not (1 <= width <= limit and 1 <= height <= limit):
            return CommandResult(
                success=False,
                error=f"Layout size must be within 1..{limit} rooms per side",
                exit_code=1,
            )
        return ctx.layout_result(Layout.empty(width, height), f"Created {width}x{height} layout")


class ShowCommand(CLICommand):
    """Decode and draw a layout."""

    name = "show"
    description = "Decode a token and draw the layout"
    aliases = ["view"]

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("token", nargs="?", default=None, help="Layout token")

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        try:
            layout = ctx.load_layout(args.token)
        except COMMAND_ERRORS as e:
            return _failure(e)

        if ctx.output_format == OutputFormat.JSON:
            return CommandResult(success=True, message="Layout", data=layout.to_dict())
        return CommandResult(
            success=True,
            message=f"{layout.width}x{layout.height} layout, {layout.item_count} item(s)",
            data=render_text(layout),
        )


class _OperationCommand(CLICommand):
    """Command that applies one named layout operation to a token."""

    operation: str = ""

    def operation_for(self, args: argparse.Namespace) -> str:
        return self.operation

    def params(self, args: argparse.Namespace) -> Dict[str, Any]:
        return {"row": args.row, "col": args.col}

    def describe(self, args: argparse.Namespace) -> str:
        return f"Applied {self.operation_for(args)} at ({args.row}, {args.col})"

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        try:
            layout = ctx.load_layout(args.token)
            layout = apply_operation(layout, self.operation_for(args), self.params(args))
        except COMMAND_ERRORS as e:
            return _failure(e)
        return ctx.layout_result(layout, self.describe(args))


class PlaceCommand(_OperationCommand):
    """Put a catalog item in a room cell."""

    name = "place"
    description = "Place an item in a room cell"
    aliases = ["put"]
    operation = "place"

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        _add_cell_arguments(parser)
        parser.add_argument("item", help="Item kind, e.g. fridge")
        parser.add_argument(
            "--orientation", "-o",
            type=int,
            choices=[0, 90, 180, 270],
            default=0,
            help="Clockwise rotation in degrees",
        )
        _add_token_argument(parser)

    def params(self, args: argparse.Namespace) -> Dict[str, Any]:
        return {"row": args.row, "col": args.col, "item": args.item, "orientation": args.orientation}

    def describe(self, args: argparse.Namespace) -> str:
        return f"Placed {args.item} at ({args.row}, {args.col})"


class RotateCommand(_OperationCommand):
    """Turn an item a quarter turn."""

    name = "rotate"
    description = "Rotate the item in a room cell"
    aliases = ["turn"]

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        _add_cell_arguments(parser)
        parser.add_argument("--left", "-l", action="store_true", help="Rotate counterclockwise")
        _add_token_argument(parser)

    def operation_for(self, args: argparse.Namespace) -> str:
        return "rotate_left" if args.left else "rotate_right"


class SwapCommand(_OperationCommand):
    """Exchange two room cells."""

    name = "swap"
    description = "Swap the contents of two room cells"
    aliases = ["move"]
    operation = "swap"

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        _add_cell_arguments(parser)
        _add_cell_arguments(parser, suffix="2")
        _add_token_argument(parser)

    def params(self, args: argparse.Namespace) -> Dict[str, Any]:
        return {"row": args.row, "col": args.col, "row2": args.row2, "col2": args.col2}

    def describe(self, args: argparse.Namespace) -> str:
        return f"Swapped ({args.row}, {args.col}) with ({args.row2}, {args.col2})"


class ClearCommand(_OperationCommand):
    """Empty one room cell, or all of them."""

    name = "clear"
    description = "Remove the item from a room cell (or every item with --all)"
    aliases = ["delete", "rm"]

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("row", type=int, nargs="?", default=None, help="Grid row index")
        parser.add_argument("col", type=int, nargs="?", default=None, help="Grid column index")
        parser.add_argument("--all", "-a", action="store_true", help="Remove every item")
        _add_token_argument(parser)

    def operation_for(self, args: argparse.Namespace) -> str:
        return "remove_squares" if args.all else "clear"

    def describe(self, args: argparse.Namespace) -> str:
        if args.all:
            return "Removed all items"
        return f"Cleared ({args.row}, {args.col})"


class WallCommand(_OperationCommand):
    """Draw on a wall segment."""

    name = "wall"
    description = "Set a wall segment to none, wall or counter"
    aliases = ["draw"]
    operation = "wall"

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        _add_cell_arguments(parser)
        parser.add_argument(
            "--type",
            dest="wall_type",
            choices=[w.value for w in WallType],
            default=WallType.WALL.value,
            help="Segment content",
        )
        _add_token_argument(parser)

    def params(self, args: argparse.Namespace) -> Dict[str, Any]:
        return {"row": args.row, "col": args.col, "wall": args.wall_type}

    def describe(self, args: argparse.Namespace) -> str:
        return f"Set ({args.row}, {args.col}) to {args.wall_type}"


class ClearWallsCommand(_OperationCommand):
    """Remove every wall segment."""

    name = "clear-walls"
    description = "Remove all walls and counters"
    aliases = ["unwall"]
    operation = "remove_walls"

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        _add_token_argument(parser)

    def params(self, args: argparse.Namespace) -> Dict[str, Any]:
        return {}

    def describe(self, args: argparse.Namespace) -> str:
        return "Removed all walls"


class CatalogCommand(CLICommand):
    """List placeable items."""

    name = "catalog"
    description = "List the items that can be placed"
    aliases = ["items"]

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        rows: List[Dict[str, Any]] = [
            {"code": info.code, "kind": info.kind.value, "label": info.label}
            for info in placeable_items()
        ]
        return CommandResult(success=True, message=f"{len(rows)} items", data=rows)


DEFAULT_COMMANDS = [
    NewCommand,
    ShowCommand,
    PlaceCommand,
    RotateCommand,
    SwapCommand,
    ClearCommand,
    WallCommand,
    ClearWallsCommand,
    CatalogCommand,
]

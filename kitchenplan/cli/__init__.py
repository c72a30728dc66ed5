"""
cli/ - Command Line Interface

Token-in, token-out commands for building layouts from a shell:
- Layout commands (new, show, clear-walls)
- Item commands (place, rotate, swap, clear)
- Wall commands (wall)
- Catalog listing
"""

from .core import (
    CLIContext,
    OutputFormat,
    CommandResult,
    CommandRegistry,
    CLICommand,
    command_registry,
    format_output,
)

from .commands import (
    NewCommand,
    ShowCommand,
    PlaceCommand,
    RotateCommand,
    SwapCommand,
    ClearCommand,
    WallCommand,
    ClearWallsCommand,
    CatalogCommand,
    DEFAULT_COMMANDS,
    render_text,
)


__all__ = [
    # Core
    "CLIContext",
    "OutputFormat",
    "CommandResult",
    "CommandRegistry",
    "CLICommand",
    "command_registry",
    "format_output",
    # Commands
    "NewCommand",
    "ShowCommand",
    "PlaceCommand",
    "RotateCommand",
    "SwapCommand",
    "ClearCommand",
    "WallCommand",
    "ClearWallsCommand",
    "CatalogCommand",
    "DEFAULT_COMMANDS",
    "render_text",
]

"""
cli/core.py - Core CLI infrastructure v1.0

Commands operate on a layout token: each one decodes the token given on the
command line (or starts from the default layout), applies its change and
reports the new token.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field
from enum import Enum
from abc import ABC, abstractmethod
import argparse
import json
import logging

from kitchenplan.bootstrap.config import KitchenPlanConfig, get_config
from kitchenplan.codec.token import decode_layout, encode_layout
from kitchenplan.layout.grid import Layout

logger = logging.getLogger("cli")


class OutputFormat(Enum):
    """Output format options."""
    TEXT = "text"
    JSON = "json"
    TABLE = "table"
    MINIMAL = "minimal"


@dataclass
class CLIContext:
    """Context for CLI operations."""

    config: KitchenPlanConfig = field(default_factory=get_config)

    # Output settings
    output_format: OutputFormat = OutputFormat.TEXT
    verbose: bool = False

    # Tokens produced during this run
    history: List[str] = field(default_factory=list)

    def load_layout(self, token: Optional[str]) -> Layout:
        """Decode a token, or build the default empty layout when none is given."""
        if not token:
            return Layout.empty(self.config.grid.default_width, self.config.grid.default_height)
        return decode_layout(token)

    def layout_result(self, layout: Layout, message: str) -> "CommandResult":
        """Successful result carrying the layout's new token."""
        token = encode_layout(layout)
        self.history.append(token)
        return CommandResult(
            success=True,
            message=message,
            data={"token": token, "items": layout.item_count},
        )


@dataclass
class CommandResult:
    """Result of a CLI command execution."""

    success: bool = True
    message: str = ""
    data: Any = None
    error: Optional[str] = None

    exit_code: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "message": self.message,
            "data": self.data,
            "error": self.error,
        }


class CLICommand(ABC):
    """Base class for CLI commands."""

    name: str = "command"
    description: str = "Base command"
    aliases: List[str] = []

    @abstractmethod
    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        """Execute the command."""
        pass

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        """Configure argument parser for this command."""
        pass


class CommandRegistry:
    """Registry for CLI commands."""

    def __init__(self):
        self._commands: Dict[str, CLICommand] = {}
        self._aliases: Dict[str, str] = {}

    def register(self, command: CLICommand) -> None:
        """Register a command."""
        self._commands[command.name] = command
        for alias in command.aliases:
            self._aliases[alias] = command.name

    def get(self, name: str) -> Optional[CLICommand]:
        """Get command by name or alias."""
        if name in self._commands:
            return self._commands[name]
        if name in self._aliases:
            return self._commands[self._aliases[name]]
        return None

    def list_commands(self) -> List[str]:
        """List all command names."""
        return list(self._commands.keys())

    def get_all(self) -> Dict[str, CLICommand]:
        """Get all commands."""
        return dict(self._commands)


# Global registry
command_registry = CommandRegistry()


def format_output(result: CommandResult, format: OutputFormat) -> str:
    """Format command result for display."""
    if format == OutputFormat.JSON:
        return json.dumps(result.to_dict(), indent=2, default=str)

    elif format == OutputFormat.TABLE:
        if isinstance(result.data, list) and result.data:
            lines = []
            if isinstance(result.data[0], dict):
                keys = list(result.data[0].keys())
                lines.append(" | ".join(keys))
                lines.append("-" * (len(keys) * 15))
                for row in result.data:
                    lines.append(" | ".join(str(row.get(k, "")) for k in keys))
            return "\n".join(lines)
        return str(result.data)

    elif format == OutputFormat.MINIMAL:
        if result.success:
            if isinstance(result.data, dict) and "token" in result.data:
                return result.data["token"]
            return str(result.data) if result.data else ""
        return result.error or "Error"

    else:  # TEXT
        if result.success:
            output = result.message
            if result.data:
                if isinstance(result.data, dict):
                    for k, v in result.data.items():
                        output += f"\n  {k}: {v}"
                elif isinstance(result.data, list):
                    for row in result.data:
                        output += f"\n  {row}"
                else:
                    output += f"\n{result.data}"
            return output
        return f"Error: {result.error}"

"""
bootstrap/entrypoints.py - Application entry points v1.0

Provides CLI and API entry points.
"""

from __future__ import annotations
from typing import List, Optional
import argparse
import json
import logging
import os
import sys

logger = logging.getLogger("bootstrap.entrypoints")

# Root handlers installed by the last setup_logging call
_installed_handlers: List[logging.Handler] = []


class JSONFormatter(logging.Formatter):
    """One JSON object per log record."""

    def format(self, record):
        return json.dumps({
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        })


def setup_logging(level: str = "INFO", log_file: str = None, json_format: bool = False) -> None:
    """
    Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional log file path
        json_format: Use JSON format for logs
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if json_format:
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )

    # Console handler; stderr keeps stdout clean for tokens
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)

    # Root logger; replace handlers from a previous call instead of stacking them
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    # File handler
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(log_level)
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    """Argument parser with one subcommand per registered CLI command."""
    from kitchenplan.cli.core import OutputFormat, command_registry
    from kitchenplan.cli.commands import DEFAULT_COMMANDS

    for command_cls in DEFAULT_COMMANDS:
        if command_registry.get(command_cls.name) is None:
            command_registry.register(command_cls())

    parser = argparse.ArgumentParser(
        description="Kitchen floorplan layout tools",
        prog="kitchenplan",
    )
    parser.add_argument(
        "-c", "--config",
        help="Path to configuration file",
        default=None,
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Log level",
    )
    parser.add_argument(
        "--log-file",
        help="Log file path",
        default=None,
    )
    parser.add_argument(
        "--format", "-f",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.TEXT.value,
        help="Output format",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")
    for name, command in command_registry.get_all().items():
        sub = subparsers.add_parser(
            name,
            aliases=command.aliases,
            help=command.description,
            description=command.description,
        )
        command.configure_parser(sub)

    return parser


def cli_main(args: list = None) -> int:
    """
    CLI entry point.

    Args:
        args: Command line arguments (defaults to sys.argv)

    Returns:
        Exit code
    """
    from kitchenplan.bootstrap.config import load_config
    from kitchenplan.cli.core import CLIContext, OutputFormat, command_registry, format_output

    parser = build_parser()
    parsed = parser.parse_args(args)

    if not parsed.command:
        parser.print_help()
        return 2

    log_level = "DEBUG" if parsed.verbose else parsed.log_level
    setup_logging(level=log_level, log_file=parsed.log_file)

    try:
        config = load_config(parsed.config)
        ctx = CLIContext(
            config=config,
            output_format=OutputFormat(parsed.format),
            verbose=parsed.verbose,
        )
        command = command_registry.get(parsed.command)
        result = command.execute(ctx, parsed)
        print(format_output(result, ctx.output_format))
        return result.exit_code

    except KeyboardInterrupt:
        print("\nInterrupted")
        return 130
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        return 1


def api_main(args: list = None) -> None:
    """
    API server entry point.

    Args:
        args: Command line arguments
    """
    parser = argparse.ArgumentParser(
        description="Kitchen plan API Server",
        prog="kitchenplan-api",
    )

    parser.add_argument(
        "-c", "--config",
        help="Path to configuration file",
        default=None,
    )
    parser.add_argument(
        "-p", "--port",
        type=int,
        help="API port",
        default=None,
    )
    parser.add_argument(
        "-H", "--host",
        help="API host",
        default=None,
    )
    parser.add_argument(
        "-w", "--workers",
        type=int,
        help="Number of workers",
        default=None,
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level",
    )

    parsed = parser.parse_args(args)

    try:
        import uvicorn
        from kitchenplan.bootstrap.config import load_config
        from kitchenplan.shell.api_endpoints import create_app

        config = load_config(parsed.config)

        setup_logging(
            level=parsed.log_level or config.logging.level,
            log_file=config.logging.log_file,
            json_format=config.logging.json_logs,
        )

        # Override config with CLI args
        if parsed.port:
            config.api.port = parsed.port
        if parsed.host:
            config.api.host = parsed.host
        if parsed.workers:
            config.api.workers = parsed.workers

        logger.info(f"Starting API on {config.api.host}:{config.api.port}")

        # Worker processes build their own app, so uvicorn needs an import string
        if config.api.workers > 1:
            if parsed.config:
                os.environ["KITCHENPLAN_CONFIG"] = parsed.config
            app = "kitchenplan.shell.api_endpoints:create_app"
        else:
            app = create_app(config)

        uvicorn.run(
            app,
            factory=isinstance(app, str),
            host=config.api.host,
            port=config.api.port,
            workers=config.api.workers,
        )

    except KeyboardInterrupt:
        print("\nShutting down...")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)


def main(argv: Optional[list] = None):
    """Main entry point for the package."""
    argv = sys.argv[1:] if argv is None else argv

    if argv and argv[0] == "api":
        api_main(argv[1:])
    else:
        sys.exit(cli_main(argv))


if __name__ == "__main__":
    main()

"""
bootstrap/ - Bootstrap Layer

Provides configuration loading, logging setup and the CLI/API entry points.
"""

from .config import (
    KitchenPlanConfig,
    GridConfig,
    APIConfig,
    LoggingConfig,
    load_config,
    get_config,
)

from .entrypoints import (
    cli_main,
    api_main,
    setup_logging,
    main,
)


__all__ = [
    # Config
    "KitchenPlanConfig",
    "GridConfig",
    "APIConfig",
    "LoggingConfig",
    "load_config",
    "get_config",
    # Entry Points
    "cli_main",
    "api_main",
    "setup_logging",
    "main",
]

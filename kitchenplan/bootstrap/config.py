"""
bootstrap/config.py - Application configuration v1.0

Provides configuration loading from files, environment variables, and defaults.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from pathlib import Path
import os
import json
import logging

from kitchenplan.codec.token import MAX_DIMENSION

logger = logging.getLogger("bootstrap.config")


@dataclass
class GridConfig:
    """Layout size defaults and limits."""

    default_width: int = 6
    default_height: int = 4
    max_dimension: int = MAX_DIMENSION

    def __post_init__(self):
        self.max_dimension = min(self.max_dimension, MAX_DIMENSION)
        if not (1 <= self.default_width <= self.max_dimension):
            raise ValueError(f"default_width must be in 1..{self.max_dimension}")
        if not (1 <= self.default_height <= self.max_dimension):
            raise ValueError(f"default_height must be in 1..{self.max_dimension}")

    @classmethod
    def from_env(cls) -> "GridConfig":
        return cls(
            default_width=int(os.getenv("KITCHENPLAN_DEFAULT_WIDTH", "6")),
            default_height=int(os.getenv("KITCHENPLAN_DEFAULT_HEIGHT", "4")),
            max_dimension=int(os.getenv("KITCHENPLAN_MAX_DIMENSION", str(MAX_DIMENSION))),
        )


@dataclass
class APIConfig:
    """API server configuration."""

    host: str = "0.0.0.0"
    port: int = 8000
    workers: int = 1
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    share_base_url: str = "http://localhost:3000/"

    @classmethod
    def from_env(cls) -> "APIConfig":
        cors = os.getenv("KITCHENPLAN_API_CORS_ORIGINS", "*")
        return cls(
            host=os.getenv("KITCHENPLAN_API_HOST", "0.0.0.0"),
            port=int(os.getenv("KITCHENPLAN_API_PORT", "8000")),
            workers=int(os.getenv("KITCHENPLAN_API_WORKERS", "1")),
            cors_origins=cors.split(",") if cors else ["*"],
            share_base_url=os.getenv("KITCHENPLAN_SHARE_BASE_URL", "http://localhost:3000/"),
        )


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    log_file: Optional[str] = None
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        return cls(
            level=os.getenv("KITCHENPLAN_LOG_LEVEL", "INFO"),
            log_file=os.getenv("KITCHENPLAN_LOG_FILE"),
            json_logs=os.getenv("KITCHENPLAN_JSON_LOGS", "false").lower() == "true",
        )


@dataclass
class KitchenPlanConfig:
    """Root configuration."""

    environment: str = "development"
    debug: bool = False

    grid: GridConfig = field(default_factory=GridConfig)
    api: APIConfig = field(default_factory=APIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> "KitchenPlanConfig":
        """Create configuration from environment variables."""
        return cls(
            environment=os.getenv("KITCHENPLAN_ENVIRONMENT", "development"),
            debug=os.getenv("KITCHENPLAN_DEBUG", "false").lower() == "true",
            grid=GridConfig.from_env(),
            api=APIConfig.from_env(),
            logging=LoggingConfig.from_env(),
        )

    @classmethod
    def from_file(cls, filepath: str) -> "KitchenPlanConfig":
        """Load configuration from JSON file."""
        path = Path(filepath)
        if not path.exists():
            logger.warning(f"Config file not found: {filepath}, using defaults")
            return cls.from_env()

        with open(path) as f:
            data = json.load(f)

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "KitchenPlanConfig":
        """Create config from dictionary; file values override the environment."""
        config = cls.from_env()

        if "environment" in data:
            config.environment = data["environment"]
        if "debug" in data:
            config.debug = data["debug"]

        for section in ("api", "logging"):
            for key, value in data.get(section, {}).items():
                target = getattr(config, section)
                if hasattr(target, key):
                    setattr(target, key, value)

        if "grid" in data:
            # Rebuild so the bounds checks run on the merged values
            merged = {
                "default_width": config.grid.default_width,
                "default_height": config.grid.default_height,
                "max_dimension": config.grid.max_dimension,
            }
            merged.update({k: v for k, v in data["grid"].items() if k in merged})
            config.grid = GridConfig(**merged)

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Serialize config to dictionary."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "grid": {
                "default_width": self.grid.default_width,
                "default_height": self.grid.default_height,
                "max_dimension": self.grid.max_dimension,
            },
            "api": {
                "host": self.api.host,
                "port": self.api.port,
                "workers": self.api.workers,
                "share_base_url": self.api.share_base_url,
            },
            "logging": {
                "level": self.logging.level,
                "log_file": self.logging.log_file,
                "json_logs": self.logging.json_logs,
            },
        }


# Global config instance
_config: Optional[KitchenPlanConfig] = None


def load_config(filepath: str = None) -> KitchenPlanConfig:
    """
    Load configuration from file or environment.

    Args:
        filepath: Optional path to JSON config file
            (defaults to $KITCHENPLAN_CONFIG)

    Returns:
        KitchenPlanConfig instance
    """
    global _config

    filepath = filepath or os.getenv("KITCHENPLAN_CONFIG")
    if filepath:
        _config = KitchenPlanConfig.from_file(filepath)
    else:
        default_paths = [
            "./kitchenplan.json",
            os.path.expanduser("~/.kitchenplan/config.json"),
        ]

        for path in default_paths:
            if Path(path).exists():
                logger.info(f"Loading config from: {path}")
                _config = KitchenPlanConfig.from_file(path)
                return _config

        _config = KitchenPlanConfig.from_env()

    logger.info(f"Configuration loaded: environment={_config.environment}")
    return _config


def get_config() -> KitchenPlanConfig:
    """Get current configuration, loading if needed."""
    global _config
    if _config is None:
        _config = load_config()
    return _config

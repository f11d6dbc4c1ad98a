"""Shared utilities for the cargo-rpl front-end."""

from .config import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG_FILE,
    RplConfig,
    load_config,
)
from .errors import (
    ConfigError,
    LaunchError,
    RplError,
)

__all__ = [
    # Configuration
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_FILE",
    "RplConfig",
    "load_config",
    # Errors
    "RplError",
    "LaunchError",
    "ConfigError",
]

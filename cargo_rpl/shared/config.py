"""Configuration loading for cargo-rpl.

Settings come from an optional YAML file and a handful of environment
variables. The file is looked up via ``CARGO_RPL_CONFIG`` first, then as
``.cargo-rpl.yaml`` in the working directory.

Example ``.cargo-rpl.yaml``::

    cargo: /opt/rust/bin/cargo
    driver: target/debug/rpl-driver
    verbose: true
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping

import yaml

from .errors import ConfigError

CONFIG_ENV_VAR = "CARGO_RPL_CONFIG"
VERBOSE_ENV_VAR = "CARGO_RPL_VERBOSE"
DEFAULT_CONFIG_FILE = ".cargo-rpl.yaml"

_KNOWN_KEYS = frozenset({"cargo", "driver", "verbose"})
_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True, slots=True)
class RplConfig:
    """Resolved front-end settings."""

    cargo: str | None = None
    driver: Path | None = None
    verbose: bool = False


def _parse_config(data: Any, config_path: Path) -> RplConfig:
    if data is None:
        return RplConfig()
    if not isinstance(data, dict):
        raise ConfigError("Config root must be a mapping", str(config_path))

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s): {', '.join(unknown)}", str(config_path))

    cargo = data.get("cargo")
    if cargo is not None and not isinstance(cargo, str):
        raise ConfigError("'cargo' must be a string", str(config_path))

    driver = data.get("driver")
    if driver is not None and not isinstance(driver, str):
        raise ConfigError("'driver' must be a string", str(config_path))

    verbose = data.get("verbose", False)
    if not isinstance(verbose, bool):
        raise ConfigError("'verbose' must be a boolean", str(config_path))

    driver_path = None
    if driver:
        # Relative driver paths are taken relative to the config file
        driver_path = Path(driver)
        if not driver_path.is_absolute():
            driver_path = config_path.parent / driver_path

    return RplConfig(cargo=cargo or None, driver=driver_path, verbose=verbose)


def load_config_file(config_path: Path) -> RplConfig:
    """Load settings from a YAML config file.

    Raises:
        ConfigError: If the file cannot be read or is malformed.
    """
    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Failed to read config file: {e}", str(config_path)) from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}", str(config_path)) from e

    return _parse_config(data, config_path)


def load_config(
    env: Mapping[str, str] | None = None,
    cwd: Path | None = None,
) -> RplConfig:
    """Resolve the effective configuration.

    An explicitly named config file must exist; the default file is
    optional. ``CARGO_RPL_VERBOSE`` turns verbose mode on regardless of
    the file.
    """
    env = os.environ if env is None else env
    cwd = Path.cwd() if cwd is None else cwd

    explicit = env.get(CONFIG_ENV_VAR)
    if explicit:
        config = load_config_file(cwd / explicit)
    elif (cwd / DEFAULT_CONFIG_FILE).is_file():
        config = load_config_file(cwd / DEFAULT_CONFIG_FILE)
    else:
        config = RplConfig()

    if env.get(VERBOSE_ENV_VAR, "").strip().lower() in _TRUTHY and not config.verbose:
        config = replace(config, verbose=True)

    return config

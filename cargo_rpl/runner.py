"""Spawning cargo with the RPL driver installed as the rustc wrapper."""

from __future__ import annotations

import os
import shutil
import subprocess
import sys
from pathlib import Path
from typing import Mapping, Protocol

from .invocation import WRAPPER_ENV_VAR, Invocation
from .shared.config import RplConfig
from .shared.errors import ConfigError, LaunchError

CARGO_ENV_VAR = "CARGO"
DEFAULT_CARGO = "cargo"
DRIVER_NAME = "rpl-driver"
PROGRAM_NAME = "cargo-rpl"

# Returned when cargo died without an exit status (e.g. killed by a signal)
ABNORMAL_EXIT = -1


class DriverResolver(Protocol):
    """Locates the RPL driver executable."""

    def resolve(self) -> Path: ...


class SiblingDriverResolver:
    """Finds ``rpl-driver`` next to the running ``cargo-rpl`` program."""

    def __init__(self, program: str, *, windows: bool | None = None) -> None:
        self.program = program
        self.windows = sys.platform == "win32" if windows is None else windows

    def resolve(self) -> Path:
        program = self.program
        # Bare names come from PATH lookup, not the working directory
        if not os.path.dirname(program):
            program = shutil.which(program) or program
        path = Path(program).resolve().with_name(DRIVER_NAME)
        if self.windows:
            path = path.with_suffix(".exe")
        return path


class FixedDriverResolver:
    """Always returns the same driver path."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def resolve(self) -> Path:
        return self.path


def resolve_cargo(
    env: Mapping[str, str] | None = None,
    config: RplConfig | None = None,
) -> str:
    """cargo executable: ``$CARGO``, then the config file, then ``cargo``."""
    env = os.environ if env is None else env
    if env.get(CARGO_ENV_VAR):
        return env[CARGO_ENV_VAR]
    if config is not None and config.cargo:
        return config.cargo
    return DEFAULT_CARGO


def resolver_for(program: str, config: RplConfig | None = None) -> DriverResolver:
    """Pick a driver resolver, preferring an explicitly configured path.

    Under ``python -m cargo_rpl`` the program is the package's
    ``__main__.py``, which has no driver beside it; the installed
    ``cargo-rpl`` is used instead.

    Raises:
        ConfigError: If run as a module with no driver configured and no
            ``cargo-rpl`` on PATH.
    """
    if config is not None and config.driver is not None:
        return FixedDriverResolver(config.driver)
    if Path(program).name == "__main__.py":
        installed = shutil.which(PROGRAM_NAME)
        if installed is None:
            raise ConfigError(
                f"cannot locate {DRIVER_NAME} when run as a module; "
                "set 'driver' in .cargo-rpl.yaml or install cargo-rpl"
            )
        return SiblingDriverResolver(installed)
    return SiblingDriverResolver(program)


def exit_code_for(returncode: int) -> int:
    """Map a subprocess return code to this process's exit code."""
    if returncode < 0:
        return ABNORMAL_EXIT
    return returncode


def run(
    invocation: Invocation,
    *,
    resolver: DriverResolver,
    cargo: str = DEFAULT_CARGO,
    verbose: bool = False,
) -> int:
    """Run cargo for ``invocation`` and wait for it to finish.

    Returns:
        0 on success, cargo's own exit code on failure, or ``ABNORMAL_EXIT``
        when cargo was terminated by a signal.

    Raises:
        LaunchError: If cargo could not be started or waited on.
    """
    driver_path = resolver.resolve()
    command = invocation.command(cargo)
    env = invocation.environment(driver_path)

    if verbose:
        print(f"{WRAPPER_ENV_VAR}={driver_path}", file=sys.stderr)
        print(f"$ {' '.join(command)}", file=sys.stderr)

    # On Windows, resolve the executable path to handle .cmd/.bat files
    resolved_cmd = list(command)
    if sys.platform == "win32":
        resolved = shutil.which(command[0])
        if resolved:
            resolved_cmd[0] = resolved

    try:
        process = subprocess.Popen(resolved_cmd, env=env)
    except OSError as e:
        raise LaunchError(cargo, e.strerror or str(e)) from e

    try:
        returncode = process.wait()
    except OSError as e:
        raise LaunchError(cargo, f"failed to wait for process: {e}") from e

    return exit_code_for(returncode)

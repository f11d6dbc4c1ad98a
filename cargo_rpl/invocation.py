"""Translation of ``cargo rpl`` arguments into a cargo invocation.

Arguments are split between cargo itself and the RPL driver:

- ``--fix`` selects ``cargo fix`` instead of ``cargo check`` and implies
  ``--no-deps``
- ``--no-deps`` is handed to the driver only
- everything after ``--`` goes to the driver untouched
- everything else goes to cargo

The driver never sees its arguments on the command line. cargo runs it as
``RUSTC_WORKSPACE_WRAPPER`` and the list travels in ``RPL_ARGS``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, Mapping

FIX_FLAG = "--fix"
NO_DEPS_FLAG = "--no-deps"
SEPARATOR = "--"

WRAPPER_ENV_VAR = "RUSTC_WORKSPACE_WRAPPER"
RPL_ARGS_ENV_VAR = "RPL_ARGS"
# Not escaped: an argument containing this text will be split by the driver
RPL_ARGS_SEPARATOR = "__RPL_HACKERY__"


class Subcommand(str, Enum):
    """cargo subcommand used to drive the build."""

    CHECK = "check"
    FIX = "fix"

    def __str__(self) -> str:
        return self.value


def serialize_rpl_args(args: Iterable[str]) -> str:
    """Join driver arguments into the ``RPL_ARGS`` value.

    Every entry is followed by the separator, including the last one.
    """
    return "".join(f"{arg}{RPL_ARGS_SEPARATOR}" for arg in args)


def parse_rpl_args(value: str) -> list[str]:
    """Recover the driver argument list from an ``RPL_ARGS`` value."""
    if not value:
        return []
    parts = value.split(RPL_ARGS_SEPARATOR)
    if parts[-1] == "":
        parts.pop()
    return parts


@dataclass
class Invocation:
    """A fully partitioned ``cargo rpl`` run."""

    subcommand: Subcommand = Subcommand.CHECK
    cargo_args: list[str] = field(default_factory=list)
    rpl_args: list[str] = field(default_factory=list)

    @classmethod
    def from_args(cls, args: Iterable[str]) -> Invocation:
        """Partition arguments (program name and ``rpl`` already stripped).

        Never fails: an empty sequence gives ``cargo check`` with no extra
        arguments.
        """
        invocation = cls()
        tokens = iter(args)

        for arg in tokens:
            if arg == FIX_FLAG:
                invocation.subcommand = Subcommand.FIX
                continue
            if arg == NO_DEPS_FLAG:
                invocation.rpl_args.append(NO_DEPS_FLAG)
                continue
            if arg == SEPARATOR:
                break
            invocation.cargo_args.append(arg)

        # Whatever follows the separator is not inspected
        invocation.rpl_args.extend(tokens)

        if invocation.subcommand is Subcommand.FIX and NO_DEPS_FLAG not in invocation.rpl_args:
            invocation.rpl_args.append(NO_DEPS_FLAG)

        return invocation

    def command(self, cargo: str = "cargo") -> list[str]:
        """Process arguments for the cargo subprocess."""
        return [cargo, self.subcommand.value, *self.cargo_args]

    def environment(
        self,
        driver_path: Path,
        base: Mapping[str, str] | None = None,
    ) -> dict[str, str]:
        """Environment for the cargo subprocess.

        ``base`` defaults to the current process environment.
        """
        env = dict(os.environ if base is None else base)
        env[WRAPPER_ENV_VAR] = str(driver_path)
        env[RPL_ARGS_ENV_VAR] = serialize_rpl_args(self.rpl_args)
        return env

"""Early-exit handling for ``--help``, ``--version`` and ``--explain``.

These flags are honoured anywhere on the command line, including when the
binary is run directly as ``cargo-rpl`` rather than through cargo.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

HELP_FLAGS = frozenset({"-h", "--help"})
VERSION_FLAGS = frozenset({"-V", "--version"})
EXPLAIN_FLAG = "--explain"


class RouteAction(Enum):
    HELP = "help"
    VERSION = "version"
    EXPLAIN = "explain"
    INVOKE = "invoke"


@dataclass(frozen=True, slots=True)
class Route:
    """What to do with a command line."""

    action: RouteAction
    lint: str | None = None

    @property
    def is_early_exit(self) -> bool:
        return self.action is not RouteAction.INVOKE


def normalize_lint_name(name: str) -> str:
    """Lower-case a lint name, touching ASCII letters only."""
    return "".join(c.lower() if c.isascii() else c for c in name)


def route(args: Sequence[str]) -> Route:
    """Classify the full raw argument list.

    Help wins over version, version over explain. ``--explain`` without a
    lint name falls back to help.
    """
    if any(arg in HELP_FLAGS for arg in args):
        return Route(RouteAction.HELP)

    if any(arg in VERSION_FLAGS for arg in args):
        return Route(RouteAction.VERSION)

    if EXPLAIN_FLAG in args:
        pos = list(args).index(EXPLAIN_FLAG)
        if pos + 1 < len(args):
            return Route(RouteAction.EXPLAIN, lint=normalize_lint_name(args[pos + 1]))
        return Route(RouteAction.HELP)

    return Route(RouteAction.INVOKE)

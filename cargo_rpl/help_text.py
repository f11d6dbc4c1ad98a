"""Help and version text."""

from __future__ import annotations

import os
import sys
from functools import lru_cache
from importlib import metadata
from pathlib import Path
from typing import Callable, Final, TextIO

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from . import DIST_NAME

TEMPLATE_DIR: Final[Path] = Path(__file__).parent / "templates"

_BOLD_GREEN = "\x1b[1;32m"
_BOLD_CYAN = "\x1b[1;36m"
_CYAN = "\x1b[36m"
_RESET = "\x1b[0m"

LINT_LEVELS: Final[list[tuple[str, str, str]]] = [
    ("-W", "--warn", "warnings"),
    ("-A", "--allow", "allowed"),
    ("-D", "--deny", "denied"),
    ("-F", "--forbid", "forbidden"),
]


def _styler(code: str, enabled: bool) -> Callable[[str], str]:
    if not enabled:
        return lambda text: text
    return lambda text: f"{code}{text}{_RESET}"


@lru_cache(maxsize=2)
def _template_env(color: bool) -> Environment:
    env = Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=False,
        undefined=StrictUndefined,
        auto_reload=False,
    )
    env.filters["heading"] = _styler(_BOLD_GREEN, color)
    env.filters["flag"] = _styler(_BOLD_CYAN, color)
    env.filters["arg"] = _styler(_CYAN, color)
    return env


def color_enabled(stream: TextIO | None = None) -> bool:
    """Colour only for terminals, and never when ``NO_COLOR`` is set."""
    stream = sys.stdout if stream is None else stream
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def help_message(color: bool = False) -> str:
    """Render the ``cargo rpl --help`` text."""
    template = _template_env(color).get_template("help.txt.j2")
    return template.render(lint_levels=LINT_LEVELS)


def version_info() -> str:
    """Version line in the ``rpl 0.1.0 (abc1234 2024-05-01)`` format.

    The commit part is only present when ``GIT_HASH`` and ``COMMIT_DATE``
    were exported at build time.
    """
    try:
        version = metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        version = "0.0.0"

    git_hash = os.environ.get("GIT_HASH", "").strip()
    commit_date = os.environ.get("COMMIT_DATE", "").strip()
    if git_hash and commit_date:
        return f"rpl {version} ({git_hash} {commit_date})"
    return f"rpl {version}"


def show_help() -> None:
    print(help_message(color_enabled()))


def show_version() -> None:
    print(version_info())

#!/usr/bin/env python3
"""
cargo-rpl: run the RPL analysis driver over a cargo package.

Usage:
    cargo rpl [OPTIONS] [--] [<ARGS>...]

cargo starts this program as ``cargo-rpl rpl <ARGS>...``. Options not
understood here are passed to ``cargo check`` (or ``cargo fix`` with
``--fix``); everything after ``--`` is passed to the driver.

Examples:
    cargo rpl
    cargo rpl --manifest-path crates/foo/Cargo.toml
    cargo rpl --fix -- -D warnings
"""

from __future__ import annotations

import sys
from typing import Sequence

from cargo_rpl.help_text import show_help, show_version
from cargo_rpl.invocation import Invocation
from cargo_rpl.router import RouteAction, route
from cargo_rpl.runner import resolve_cargo, resolver_for, run
from cargo_rpl.shared.config import load_config
from cargo_rpl.shared.errors import ConfigError, LaunchError


def explain(lint: str) -> None:
    """Handle ``--explain`` for an already lower-cased lint name.

    The rpl-driver performs the documentation lookup for lints, so the
    front-end only normalizes the name and exits successfully.
    """


def process(args: Sequence[str], program: str) -> int:
    """Build and run the cargo invocation for already-stripped arguments."""
    config = load_config()
    invocation = Invocation.from_args(args)
    return run(
        invocation,
        resolver=resolver_for(program, config),
        cargo=resolve_cargo(config=config),
        verbose=config.verbose,
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv if argv is None else argv)

    decision = route(args)
    if decision.is_early_exit:
        if decision.action is RouteAction.VERSION:
            show_version()
        elif decision.action is RouteAction.EXPLAIN:
            explain(decision.lint)
        else:
            show_help()
        return 0

    program = args[0] if args else "cargo-rpl"
    try:
        return process(args[2:], program)
    except (ConfigError, LaunchError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())

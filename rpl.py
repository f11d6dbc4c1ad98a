#!/usr/bin/env python3
"""
Convenience wrapper for running cargo-rpl from a source checkout.

Forwards to the cargo_rpl module from the current directory, so cargo
sees the same working directory as an installed ``cargo-rpl`` would.
Like cargo itself, pass the ``rpl`` subcommand token first.

Usage:
    python rpl.py rpl [OPTIONS] [--] [<ARGS>...]
"""

import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent


def main() -> int:
    """Forward all arguments to the cargo_rpl module."""
    pythonpath = os.pathsep.join(
        p for p in (str(ROOT), os.environ.get("PYTHONPATH", "")) if p
    )
    return subprocess.call(
        [sys.executable, "-m", "cargo_rpl"] + sys.argv[1:],
        env={**os.environ, "PYTHONPATH": pythonpath},
    )


if __name__ == "__main__":
    sys.exit(main())

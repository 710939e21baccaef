"""Command-line front door for navi.

Takes no behavioral flags: the browser always starts in the working
directory, and tunables come from the config file.
"""

from __future__ import annotations

import argparse
import sys

from . import __version__
from .config import load_settings
from .logs import configure_logging
from .runtime import run_browser


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="navi",
        description="Browse, preview, copy, move, rename and delete files in the terminal.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and run the interactive browser."""
    build_parser().parse_args(argv)
    if not sys.stdin.isatty():
        raise SystemExit("navi needs an interactive terminal on stdin.")

    settings = load_settings()
    configure_logging(settings.log_file)
    run_browser(settings)


if __name__ == "__main__":
    main()

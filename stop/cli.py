"""Command-line interface for stop."""

import argparse
from typing import NoReturn

from . import __version__
from .abort import error, fatal


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    p = argparse.ArgumentParser(prog="stop", description="Print a message to stderr and exit with status 255")
    p.add_argument("--version", "-v", action="version", version=f"stop {__version__}")
    p.add_argument("--error", "-e", action="store_true", help='Use the "error" prefix instead of "fatal"')
    p.add_argument("message", nargs="+", help="Message words, joined with spaces")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point."""
    args = parse_args(argv)
    entry = error if args.error else fatal
    entry.display(" ".join(args.message))

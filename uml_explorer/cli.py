from __future__ import annotations

import argparse
from typing import Sequence

from rich.console import Console

from .codegen.cli_integration import create_codegen_subparser
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser with its subcommands."""
    parser = argparse.ArgumentParser(
        prog="uml-explorer",
        description="Derive diagrams and source skeletons from a UML design model",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log records to this file")

    subparsers = parser.add_subparsers(dest="command")
    create_codegen_subparser(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line interface.

    Args:
        argv: Arguments without the program name; defaults to ``sys.argv[1:]``.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)
    logger.debug("Parsed arguments: %s", args)

    if not getattr(args, "func", None):
        Console().print("❌ [red]No command given[/red]")
        parser.print_help()
        return 1

    return args.func(args)

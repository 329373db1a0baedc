from __future__ import annotations

import argparse
import logging
from typing import Sequence

from .codegen.cli_integration import create_codegen_subparsers
from .logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level ``apigen`` argument parser.

    Returns:
        Parser with the ``generate``, ``languages`` and ``info`` subcommands.
    """
    parser = argparse.ArgumentParser(
        prog="apigen",
        description=(
            "Generate language bindings from an interface description document."
        ),
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show progress logs and generation metadata",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Show debug logs",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    create_codegen_subparsers(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ``apigen`` command line.

    Args:
        argv: Arguments without the program name; defaults to ``sys.argv``.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        configure_logging(logging.DEBUG)
    elif args.verbose:
        configure_logging(logging.INFO)
    else:
        configure_logging(logging.WARNING)

    if not getattr(args, "func", None):
        parser.print_help()
        return 1

    logger.debug("Running command: %s", args.command)
    return args.func(args)

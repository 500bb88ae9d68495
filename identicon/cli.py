"""Command-line entry point.

Usage::

    identicon [-o DIR] [--mkdir] [-v] INPUT [INPUT ...]

Writes ``DIR/<INPUT>.png`` for every input and prints the written paths.
"""

import argparse
import logging
import sys
from typing import List, Optional

from identicon.config import IdenticonConfig, OUTPUT_DIR_ENV
from identicon.errors import IdenticonError
from identicon.pipeline import main as generate_and_save

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="identicon",
        description="Generate GitHub-style identicons from input strings.",
    )
    parser.add_argument("inputs", nargs="+", metavar="INPUT", help="identity string")
    parser.add_argument(
        "-o",
        "--output-dir",
        default=None,
        help=f"directory for PNG files (default: ${OUTPUT_DIR_ENV} or 'identicons')",
    )
    parser.add_argument(
        "--mkdir",
        action="store_true",
        help="create the output directory if it does not exist",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="increase log verbosity"
    )
    return parser


def _log_level(verbosity: int) -> int:
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=_log_level(args.verbose),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = IdenticonConfig.from_env().with_overrides(
        output_dir=args.output_dir, create_dirs=args.mkdir or None
    )

    status = 0
    for value in args.inputs:
        try:
            path = generate_and_save(value, config)
        except IdenticonError as exc:
            logger.error("Failed to %s identicon for %r: %s", exc.stage, value, exc)
            status = 1
            continue
        print(path)
    return status


if __name__ == "__main__":
    sys.exit(main())

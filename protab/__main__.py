"""
CLI entry point. Run as: python -m protab [path]

Reads a program from path (or standard input), loads its facts and
prints the symbol and predicate tables.

Environment:
    PROTAB_MAX_ARGUMENTS  widest application allowed (default 9; 0 = no limit)
    PROTAB_LOG_LEVEL      logging level name (default WARNING)
"""

import argparse
import logging
import os
import sys

from .core.errors import ArgumentCountExceeded, ParseError
from .core.loader import DEFAULT_MAX_ARGUMENTS, load
from .grammar import parse_file, parse_stream
from .report import format_tags, print_tables

logger = logging.getLogger("protab")


def max_arguments_from_env(environ=None):
    """PROTAB_MAX_ARGUMENTS as a limit for load(); None means unlimited."""
    environ = os.environ if environ is None else environ
    raw = environ.get("PROTAB_MAX_ARGUMENTS")
    if raw is None or raw.strip() == "":
        return DEFAULT_MAX_ARGUMENTS
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"PROTAB_MAX_ARGUMENTS must be an integer, got {raw!r}")
    return value if value > 0 else None


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="protab",
        description="Build symbol and predicate tables from a fact file",
    )
    parser.add_argument("path", nargs="?", default=None,
                        help="Program to read (default: standard input)")
    args = parser.parse_args(argv)

    level = os.environ.get("PROTAB_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        max_arguments = max_arguments_from_env()
    except ValueError as e:
        print(f"protab: {e}", file=sys.stderr)
        return 1

    try:
        if args.path is not None:
            tree = parse_file(args.path)
        else:
            tree = parse_stream(sys.stdin)
    except ParseError as e:
        print(e, file=sys.stderr)
        return 1
    except OSError as e:
        print(f"protab: {e}", file=sys.stderr)
        return 1

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("tag tree:\n%s", format_tags(tree))

    try:
        symbols, predicates = load(tree, max_arguments=max_arguments)
    except ArgumentCountExceeded as e:
        print(f"protab: {e}", file=sys.stderr)
        return 1

    print_tables(symbols, predicates)
    return 0


if __name__ == "__main__":
    sys.exit(main())

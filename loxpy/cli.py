"""Command-line driver: `loxpy tokenize <file>` and `loxpy parse <file>`."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys
from typing import Sequence, TextIO

from loxpy.lexer import TokenizeOptions, TokenOrder, render
from loxpy.pipeline import run_parse, run_tokenize

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DATA_ERROR = 65
EXIT_NO_INPUT = 66


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="loxpy", description="Lox interpreter front end")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    tokenize = commands.add_parser("tokenize", aliases=["t"], help="Print the tokens of the file")
    tokenize.add_argument("file_path", type=Path, help="The file to scan")
    tokenize.add_argument(
        "--order",
        choices=[order.value for order in TokenOrder],
        default=TokenOrder.GROUPED.value,
        help="Print tokens grouped (errors last) or in source order (default: grouped)",
    )

    parse = commands.add_parser("parse", aliases=["p"], help="Parse the file and print the literals")
    parse.add_argument("file_path", type=Path, help="The file to parse")
    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)


def _read_source(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("reading %s failed: %s", path, exc)
        return None


def _emit(lines: list[str], stream: TextIO) -> None:
    for line in lines:
        print(line, file=stream)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    source = _read_source(args.file_path)
    if source is None:
        print(f"Failed to read file {args.file_path}", file=sys.stderr)
        return EXIT_NO_INPUT

    if args.command in ("tokenize", "t"):
        logger.info("tokenizing %s (order=%s)", args.file_path, args.order)
        return _tokenize(source, TokenizeOptions.for_order(args.order))

    logger.info("parsing %s", args.file_path)
    result = run_parse(source)
    _emit(result.output_lines, sys.stdout)
    _emit(result.error_lines, sys.stderr)
    return EXIT_DATA_ERROR if result.has_errors else EXIT_OK


def _tokenize(source: str, options: TokenizeOptions) -> int:
    result = run_tokenize(source, options)
    # Each line goes to its own stream, in presentation order.
    for token in result.ordered_tokens:
        stream = sys.stderr if token.is_invalid else sys.stdout
        print(render(token), file=stream, flush=True)
    return EXIT_DATA_ERROR if result.has_errors else EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())

"""Console front end.

Run:
  python -m smart_quotes            # type text, finish with a line `exit`
  python -m smart_quotes notes.txt  # typeset a whole file
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import TextIO

from smart_quotes.console import DEFAULT_QUIT_COMMAND, read_until
from smart_quotes.states import CollapseStrategy, CurlyQuotePolicy
from smart_quotes.typesetting.config import TypesetConfig
from smart_quotes.typesetting.fixer import typeset_text

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smart-quotes",
        description="Replace straight quotes, hyphen runs and '...' with typographic punctuation.",
    )
    parser.add_argument("path", nargs="?", help="Input file (default: read the console until the quit command)")
    parser.add_argument("--explicit", action="store_true", help="Use LaTeX-style `` '' ` ' quote markers")
    parser.add_argument("--escape", action="store_true", help=r"Keep quotes written as \" or \' straight")
    parser.add_argument("--drop-curly", action="store_true", help="Remove quotes that are already curly")
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in CollapseStrategy],
        default=CollapseStrategy.SCAN.value,
        help="How dash/ellipsis runs are collapsed (default: scan)",
    )
    parser.add_argument("--no-dashes", action="store_true", help="Leave hyphen runs alone")
    parser.add_argument("--no-ellipsis", action="store_true", help="Leave '...' alone")
    parser.add_argument(
        "--quit-command",
        default=DEFAULT_QUIT_COMMAND,
        help=f"Line that ends console input (default: {DEFAULT_QUIT_COMMAND})",
    )
    parser.add_argument("--stats", action="store_true", help="Print replacement counts as JSON to stderr")
    return parser


def config_from_args(args: argparse.Namespace) -> TypesetConfig:
    return TypesetConfig(
        explicit=bool(args.explicit),
        escape=bool(args.escape),
        curly_policy=CurlyQuotePolicy.DROP if args.drop_curly else CurlyQuotePolicy.KEEP,
        collapse_strategy=CollapseStrategy(args.strategy),
        collapse_dashes=not args.no_dashes,
        collapse_ellipsis=not args.no_ellipsis,
    )


def main(
    argv: list[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.WARNING, format="smart-quotes: %(message)s", stream=stderr)
    config = config_from_args(args)

    if args.path:
        try:
            text = Path(args.path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error("cannot read %s: %s", args.path, e)
            return 1
    else:
        text = read_until(stdin, args.quit_command)

    result = typeset_text(text, config)

    if args.path:
        stdout.write(result.text)
    else:
        stdout.write(f"\n\n{result.text}\n")
    stdout.flush()

    if args.stats:
        print(json.dumps(result.stats, ensure_ascii=False, sort_keys=True), file=stderr)
    return 0

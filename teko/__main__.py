"""Run a Teko program file: `python -m teko FILE`."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from teko.config import get_recursion_limit, setup_logging
from teko.errors import TekoError
from teko.interpreter import Interpreter
from teko.printer import to_string

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="teko", description="Evaluate a Teko program.")
    parser.add_argument("file", help="program to run")
    parser.add_argument("--log-level", default=None, help="logging level (default: $TEKO_LOG_LEVEL or WARNING)")
    parser.add_argument("--log-file", default=None, help="write logs to this file instead of stderr")
    args = parser.parse_args(argv)

    setup_logging(args.log_level, args.log_file)
    limit = get_recursion_limit()
    if limit:
        sys.setrecursionlimit(limit)

    path = Path(args.file)
    try:
        source = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        print(f"Error: file not found: {path}", file=sys.stderr)
        return 1

    try:
        result = Interpreter().eval(source)
    except TekoError as exc:
        print(f"{type(exc).__name__}: {exc}", file=sys.stderr)
        return 1

    print()
    print(to_string(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

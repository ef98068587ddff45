#!/usr/bin/env python3
"""
Command line entry point for tinylisp.

Usage:
    python -m tinylisp                      # interactive REPL
    python -m tinylisp --prelude defs.lisp  # load definitions, then REPL
    python -m tinylisp -e "(+ 1 2)"         # evaluate and exit
"""

import argparse
import logging
import sys
from pathlib import Path

from tinylisp.config import get_log_level
from tinylisp.errors import LispError
from tinylisp.interpreter import Interpreter
from tinylisp.repl import repl


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tinylisp", description="A minimal Lisp interpreter")
    parser.add_argument("--prelude", type=Path, help="file of forms to evaluate before anything else")
    parser.add_argument(
        "-e", "--eval", dest="exprs", action="append", default=[], metavar="EXPR",
        help="evaluate EXPR, print the result and exit (may be repeated)",
    )
    parser.add_argument("--log-level", default=None, help="logging level (default: TINYLISP_LOG_LEVEL or WARNING)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=(args.log_level or get_log_level()).upper(),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    interp = Interpreter()
    if args.prelude is not None:
        try:
            interp.eval_all(args.prelude.read_text(encoding="utf-8"))
        except OSError as e:
            print(f"Cannot read prelude: {e}", file=sys.stderr)
            return 2
        except LispError as e:
            print(f"Error in prelude {args.prelude}: {e}", file=sys.stderr)
            return 1

    if args.exprs:
        for expr in args.exprs:
            print(interp.evaluate(expr))
        return 0

    repl(interp)
    return 0


if __name__ == "__main__":
    sys.exit(main())

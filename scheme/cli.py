"""Command-line entry points: `scheme-interpret` and `scheme-compile`."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from scheme import config
from scheme.compiler.pipeline import run_compiler_pipeline
from scheme.errors import SchemeError
from scheme.interpreter import Interpreter
from scheme.printer import to_lisp_string
from scheme.repl import run_repl

logger = logging.getLogger(__name__)


def _setup() -> None:
    logging.basicConfig(level=config.get_log_level(), format="%(levelname)s %(name)s: %(message)s")
    limit = config.get_recursion_limit()
    if limit is not None:
        sys.setrecursionlimit(limit)


def interpret_main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="scheme-interpret",
        description="A small Scheme interpreter, interactive mode on no arguments.",
    )
    parser.add_argument("-p", "--path", help="path to scheme source code")
    parser.add_argument("expr", nargs="?", help="interpret this expression")
    args = parser.parse_args(argv)
    _setup()

    interp = Interpreter()
    try:
        if args.expr is not None:
            value = interp.interpret(args.expr)
        elif args.path is not None:
            value = interp.interpret_file(args.path)
        else:
            run_repl(interp)
            return 0
        print(to_lisp_string(value))
    except (SchemeError, OSError) as e:
        logger.debug("interpretation failed", exc_info=True)
        print(f"Application error: {e}", file=sys.stderr)
        return 1
    return 0


def compile_main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="scheme-compile", description="A small Scheme compiler.")
    parser.add_argument("source", help="source of your scheme file")
    parser.add_argument(
        "-o", "--output", default=None,
        help="output assembly file (default: $SCHEME_OUTPUT or output.asm)",
    )
    args = parser.parse_args(argv)
    _setup()

    output = args.output or config.get_default_output()
    try:
        run_compiler_pipeline(args.source, output)
    except (SchemeError, OSError) as e:
        logger.debug("compilation failed", exc_info=True)
        print(f"Application error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(interpret_main())

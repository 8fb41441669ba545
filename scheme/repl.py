from __future__ import annotations

import logging
import sys
from typing import TextIO

from scheme.errors import SchemeError
from scheme.interpreter import Interpreter
from scheme.printer import to_lisp_string

logger = logging.getLogger(__name__)

PROMPT = "scheme> "


def run_repl(
    interpreter: Interpreter | None = None,
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
    prompt: str = PROMPT,
) -> None:
    """Read a line, evaluate it, print each value; errors are reported and the loop continues."""
    interp = interpreter or Interpreter()
    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            return
        try:
            for value in interp.eval_all(line):
                stdout.write(to_lisp_string(value) + "\n")
        except SchemeError as e:
            logger.debug("evaluation failed", exc_info=True)
            stdout.write(f"error: {type(e).__name__}: {e}\n")

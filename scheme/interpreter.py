from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from scheme import LispValue
from scheme.errors import SchemeRecursionError
from scheme.evaluation.evaluator import evaluate
from scheme.reader.parser import Parser
from scheme.types.environment import Environment

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Evaluates Scheme source text expression by expression.
    The Environment persists across calls, so definitions accumulate.
    """

    def __init__(self):
        self.env: Environment = Environment()

    def eval_all(self, code: str) -> Iterator[LispValue]:
        """Yield the value of each top-level expression in `code`."""
        parser = Parser(code)
        while not parser.at_eof():
            try:
                expr = parser.parse()
            except RecursionError as e:
                raise SchemeRecursionError("Expression nested too deeply to read") from e
            logger.debug("evaluating %r", expr)
            yield self.evaluate(expr)

    def evaluate(self, expr) -> LispValue:
        depth = self.env.depth
        try:
            return evaluate(expr, self.env)
        except RecursionError as e:
            # Frames are popped on unwind; guard against a partially unwound stack anyway
            del self.env.frames[depth:]
            raise SchemeRecursionError("Maximum recursion depth exceeded") from e

    def interpret(self, code: str) -> LispValue:
        """Evaluate every expression in `code` and return the last value."""
        result: LispValue = []
        for result in self.eval_all(code):
            pass
        return result

    def interpret_file(self, path: str | Path) -> LispValue:
        source = Path(path).read_text(encoding="utf-8")
        logger.debug("interpreting %s", path)
        return self.interpret(source)

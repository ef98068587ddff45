import logging
import sys

from tinylisp import LispValue, SExpression
from tinylisp.builtin.env_builtin import register
from tinylisp.config import get_recursion_limit
from tinylisp.errors import EmptyInput, LispError, RecursionDepthExceeded
from tinylisp.evaluation.evaluator import evaluate
from tinylisp.printer import to_string
from tinylisp.reader.parser import parse, parse_all
from tinylisp.types.environment import Environment


class Interpreter:
    """
    One interpreter session.
    Owns the root environment, pre-populated with the builtins, so that
    definitions made by one call are visible to later calls.
    """
    def __init__(self, prelude: str | None = None):
        self._logger = logging.getLogger("Interpreter")

        self.env = Environment()
        register(self.env)

        limit = get_recursion_limit()
        if limit is not None and limit > sys.getrecursionlimit():
            self._logger.debug("Raising recursion limit to %d", limit)
            sys.setrecursionlimit(limit)

        if prelude:
            self.eval_all(prelude)

    def _run(self, fn, *args):
        try:
            return fn(*args)
        except RecursionError:
            raise RecursionDepthExceeded() from None

    def _eval_form(self, expr: SExpression) -> LispValue:
        return evaluate(expr, self.env)

    def eval(self, code: str) -> LispValue:
        """Read a single form from `code` and evaluate it in the session env."""
        expr = self._run(parse, code)
        return self._run(self._eval_form, expr)

    def eval_all(self, code: str) -> LispValue:
        """Evaluate every form in `code` in order, returning the last value."""
        forms = self._run(parse_all, code)
        if not forms:
            raise EmptyInput()
        result = None
        for expr in forms:
            result = self._run(self._eval_form, expr)
        return result

    def evaluate(self, code: str) -> str:
        """Evaluate `code` and render the result, or the error, as text."""
        self._logger.debug("Evaluating: %s", code)
        try:
            return self._run(to_string, self.eval(code))
        except LispError as e:
            self._logger.debug("Evaluation failed: %s: %s", type(e).__name__, e)
            return f"Error: {e}"

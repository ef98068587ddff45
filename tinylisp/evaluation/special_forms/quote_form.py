from tinylisp import EvaluatorFn
from tinylisp import SExpression, LispValue
from tinylisp.errors import ArityMismatch
from tinylisp.types.environment import Environment


def quote_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(quote x) returns x unevaluated."""
    if len(tail) != 1:
        raise ArityMismatch(1, len(tail), "quote")
    return tail[0]

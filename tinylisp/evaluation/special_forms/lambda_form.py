from tinylisp import EvaluatorFn
from tinylisp import SExpression, LispValue
from tinylisp.errors import ArityMismatch, TypeMismatch
from tinylisp.types.environment import Environment
from tinylisp.types.lambda_fn import Lambda
from tinylisp.types.symbol import Symbol


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(fn (p1 p2 ...) body) closes over `env`; the body is not evaluated here."""
    if len(tail) != 2:
        raise ArityMismatch(2, len(tail), "fn")

    params, body = tail
    if not isinstance(params, list):
        raise TypeMismatch("list", params, "fn")
    for p in params:
        if not isinstance(p, Symbol):
            raise TypeMismatch("symbol", p, "fn")

    return Lambda(list(params), body, env)

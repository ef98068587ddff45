from tinylisp import EvaluatorFn
from tinylisp import SExpression, LispValue
from tinylisp.errors import ArityMismatch, TypeMismatch
from tinylisp.types.environment import Environment
from tinylisp.types.symbol import Symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def name value)
    Binds in the innermost frame of `env` and returns the symbol `name`.
    Nothing is bound if evaluating `value` fails.
    """
    if len(tail) != 2:
        raise ArityMismatch(2, len(tail), "def")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise TypeMismatch("symbol", name, "def")
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return name

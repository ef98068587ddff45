from tinylisp import EvaluatorFn
from tinylisp import SExpression, LispValue
from tinylisp.errors import ArityMismatch
from tinylisp.types.environment import Environment
from tinylisp.types.nil import is_truthy


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(if cond then else): only the branch taken is evaluated."""
    if len(tail) != 3:
        raise ArityMismatch(3, len(tail), "if")

    cond, then_expr, else_expr = tail
    if is_truthy(evaluate_fn(cond, env)):
        return evaluate_fn(then_expr, env)
    return evaluate_fn(else_expr, env)

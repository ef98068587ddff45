"""Application engine for tinylisp.

Centralizes procedure application so the evaluator and the `apply` builtin
share one set of semantics:
- Lambdas get a fresh frame, a child of their closure env, with each formal
  bound to its argument; the body is then evaluated in that frame.
- Builtins are invoked directly with the caller env and the argument list.
- Anything else is not callable.
"""

from tinylisp import LispValue, EvaluatorFn
from tinylisp.errors import NotCallable
from tinylisp.types.builtin import Builtin
from tinylisp.types.environment import Environment
from tinylisp.types.lambda_fn import Lambda


def apply_lambda(fn: Lambda, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a Lisp Lambda value to already-evaluated arguments.

    Raises ArityMismatch unless exactly one argument per formal is supplied.
    No tail-call elimination: every call nests one Python frame deeper.
    """
    new_env = fn.extend_env(args)
    return evaluate_fn(fn.body, new_env)


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Lambda or a Builtin; raise NotCallable otherwise."""
    if isinstance(head, Lambda):
        return apply_lambda(head, args, evaluate_fn)
    if isinstance(head, Builtin):
        return head(env, args)
    raise NotCallable(head)

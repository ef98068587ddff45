"""Core evaluator for the tinylisp interpreter.

A plain recursive tree walk: special forms are dispatched on the literal head
symbol before ordinary application, which evaluates the head and then every
argument left to right. There is no trampoline, so deep user recursion is
bounded by Python's recursion limit.
"""

from __future__ import annotations

from tinylisp import SExpression, LispValue
from tinylisp.types.environment import Environment
from tinylisp.types.symbol import Symbol
from tinylisp.evaluation.apply import apply
from tinylisp.evaluation.special_forms import SPECIAL_FORMS


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Reduce `expr` to a value in `env`."""
    match expr:
        case []:
            # nil evaluates to itself
            return expr
        case [head, *tail_args]:
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail_args, env, evaluate)
            fn = evaluate(head, env)
            args = [evaluate(arg, env) for arg in tail_args]
            return apply(fn, args, env, evaluate)
        case Symbol():
            return env.lookup(expr)

    # --- Numbers and procedures are self-evaluating ---
    return expr

"""Built-in functions for the tinylisp runtime environment.

Each builtin takes the caller env and a list of already-evaluated arguments,
never mutates shared state, and raises an EvalError on bad input.
"""
from __future__ import annotations

import math

from tinylisp import LispValue
from tinylisp.errors import ArityMismatch, EmptyList, NumericOverflow, TypeMismatch
from tinylisp.evaluation.apply import apply as apply_engine
from tinylisp.evaluation.evaluator import evaluate
from tinylisp.types.builtin import Builtin
from tinylisp.types.environment import Environment
from tinylisp.types.symbol import Symbol

TRUE = 1.0


def is_number_value(value: LispValue) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _expect_arity(name: str, expr: list[LispValue], n: int) -> None:
    if len(expr) != n:
        raise ArityMismatch(n, len(expr), name)


def _expect_non_empty_list(name: str, value: LispValue) -> list[LispValue]:
    if not isinstance(value, list):
        raise TypeMismatch("list", value, name)
    if not value:
        raise EmptyList(name)
    return value


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, expr: list[LispValue]) -> LispValue:
    """Return the numeric sum of all arguments; errors on non-numeric args or overflow."""
    total = 0.0
    for x in expr:
        if not is_number_value(x):
            raise TypeMismatch("number", x, "+")
        total += x
    if not math.isfinite(total):
        raise NumericOverflow("+")
    return total


# -------------------------------
# Lists
# -------------------------------
def list_builtin(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    """Construct a list from the provided arguments."""
    return list(expr)


def first(env: Environment, expr: list[LispValue]) -> LispValue:
    """Return the head of a non-empty list."""
    _expect_arity("first", expr, 1)
    return _expect_non_empty_list("first", expr[0])[0]


def rest(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    """Return a new list of everything but the head of a non-empty list."""
    _expect_arity("rest", expr, 1)
    return _expect_non_empty_list("rest", expr[0])[1:]


# -------------------------------
# Predicates
# -------------------------------
def is_number(env: Environment, expr: list[LispValue]) -> LispValue:
    """Predicate: 1 if the single argument is a Number, else nil."""
    _expect_arity("number?", expr, 1)
    return TRUE if is_number_value(expr[0]) else []


def is_symbol(env: Environment, expr: list[LispValue]) -> LispValue:
    """Predicate: 1 if the single argument is a Symbol, else nil."""
    _expect_arity("symbol?", expr, 1)
    return TRUE if isinstance(expr[0], Symbol) else []


# -------------------------------
# Application
# -------------------------------
def apply(env: Environment, expr: list[LispValue]) -> LispValue:
    """Builtin apply: (apply f args) calls f with the elements of args.

    The elements are passed as they are, without being evaluated again.
    """
    _expect_arity("apply", expr, 2)
    func, args = expr
    if not isinstance(args, list):
        raise TypeMismatch("list", args, "apply")
    return apply_engine(func, list(args), env, evaluate)


BUILTINS = {
    "+": add,
    "list": list_builtin,
    "apply": apply,
    "first": first,
    "rest": rest,
    "number?": is_number,
    "symbol?": is_symbol,
}


def register(env: Environment) -> None:
    """Register all builtin functions into the given environment."""
    env.update({Symbol(name): Builtin(name, fn) for name, fn in BUILTINS.items()})

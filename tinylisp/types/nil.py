"""Nil and truthiness.

The empty list doubles as nil and is the only falsy value. Every other
value, including the Number 0, counts as true.
"""

from tinylisp import LispValue


def is_nil(value: LispValue) -> bool:
    return isinstance(value, list) and not value


def is_truthy(value: LispValue) -> bool:
    return not is_nil(value)

from __future__ import annotations

from typing import Callable

from tinylisp import LispValue


class Builtin:
    """A primitive procedure implemented in Python.

    `fn` is called as `fn(env, args)` with the caller's environment and the
    already-evaluated argument values.
    """

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[..., LispValue]):
        self.name = name
        self.fn = fn

    def __call__(self, env, args: list[LispValue]) -> LispValue:
        return self.fn(env, args)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Builtin) and self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return f"<builtin {self.name}>"

    def __repr__(self) -> str:
        return f"Builtin({self.name!r})"

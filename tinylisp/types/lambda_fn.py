"""User-defined procedures: a lambda with formal parameters, body, and closure env."""

from __future__ import annotations

from tinylisp import SExpression, LispValue
from tinylisp.errors import ArityMismatch
from tinylisp.types.environment import Environment
from tinylisp.types.symbol import Symbol


class Lambda:
    """A first-class closure.

    `env` is the frame active where the `fn` form was evaluated. It is held by
    reference, so bindings added to that frame later (e.g. a recursive `def`)
    are visible when the body runs.
    """

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: SExpression, env: Environment):
        self.formals: list[Symbol] = formals
        self.body: SExpression = body
        self.env: Environment = env

    def __str__(self) -> str:
        return f"<fn ({' '.join(str(f) for f in self.formals)})>"

    def __repr__(self) -> str:
        return str(self)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """Bind argument values to the formals in a fresh child of the closure env."""
        if len(args) != len(self.formals):
            raise ArityMismatch(len(self.formals), len(args))
        frame = self.env.child()
        for name, value in zip(self.formals, args):
            frame.define(name, value)
        return frame

"""Runtime environment for tinylisp.

The Environment stores bindings of Symbols to evaluated Lisp values and supports
nested scopes via an `outer` link. Frames are shared by reference: a closure
keeps its defining frame alive, and several closures may share one frame.
"""

from __future__ import annotations

from typing import Optional

from tinylisp import LispValue
from tinylisp.errors import TypeMismatch, UnboundSymbol
from tinylisp.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def child(self) -> Environment:
        """Return a new empty frame whose lookups fall through to this one."""
        return Environment(outer=self)

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this (innermost) frame, overwriting any
        previous binding of the same name in this frame.

        Raises TypeMismatch if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise TypeMismatch("symbol", name, "define")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises UnboundSymbol if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise UnboundSymbol(name)
        return env.vars[name]

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, name: Symbol) -> bool:
        return self.find(name) is not None

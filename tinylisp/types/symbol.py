"""Symbols: identifiers resolved against an Environment when evaluated."""

from __future__ import annotations

import sys


class Symbol:
    """A name. Two symbols are equal exactly when their names are equal.

    Names are interned, so symbols read from source and symbols built by
    builtins compare and hash on the same string object.
    """

    __slots__ = ("id",)

    def __init__(self, name: str):
        self.id = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Symbol):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return self.id

    def __repr__(self) -> str:
        return f"Symbol({self.id!r})"

"""
  Lisp Reader: Lexer and Parser

- Whitespace separates tokens; '(' and ')' are always tokens of their own.
- Emits Python primitives instead of Cons cells:

    - lists   -> Python list (the empty list is nil)
    - numbers -> float
    - symbols -> Symbol

  An atom that reads fully as a decimal literal is a Number, any other atom
  is a Symbol. Atoms that start like a number but are not one (`12abc`,
  `1.2.3`) are rejected, and so are literals too large for a finite float
  (`1e400`).
"""

from __future__ import annotations

import math
import re
from typing import Iterator, Optional

from tinylisp import SExpression
from tinylisp.errors import EmptyInput, InvalidAtom, TrailingInput, UnmatchedParen
from tinylisp.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<atom>[^\s()]+)"  # everything else up to whitespace or a paren
    r")"
)

NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
NUMBER_PREFIX_RE = re.compile(r"[+-]?\.?\d")


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            # only trailing whitespace is left
            break
        for nm in TOKEN_RE.groupindex:
            if m.group(nm):
                yield nm, m.group(nm)
                break
        pos = m.end()


def tokenize(source: str) -> list[str]:
    """Split source text into a flat list of token strings."""
    return [value for _, value in lex(source)]


def read_atom(token: str) -> SExpression:
    """Classify an atom token as a Number or a Symbol."""
    if NUMBER_RE.fullmatch(token):
        value = float(token)
        if not math.isfinite(value):
            raise InvalidAtom(token)
        return value
    if NUMBER_PREFIX_RE.match(token):
        raise InvalidAtom(token)
    return Symbol(token)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def at_end(self) -> bool:
        return self.peek()[0] is None

    def parse_expr(self) -> SExpression:
        tok_type, tok_val = self.advance()
        if tok_type is None:
            raise EmptyInput()

        if tok_type == "atom":
            return read_atom(tok_val)

        if tok_type == "rparen":
            raise UnmatchedParen("Unexpected ')'")

        # List
        items = []
        while True:
            next_type, _ = self.peek()
            if next_type is None:
                raise UnmatchedParen("Unmatched '('")
            if next_type == "rparen":
                self.advance()
                return items
            items.append(self.parse_expr())

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.parse_expr()


def parse(source: str) -> SExpression:
    """Read exactly one form from `source`.

    Raises EmptyInput for blank input, UnmatchedParen for unbalanced
    parentheses and TrailingInput if anything follows the first form.
    """
    stream = TokenStream(lex(source))
    expr = stream.parse_expr()
    tok_type, tok_val = stream.peek()
    if tok_type == "rparen":
        raise UnmatchedParen("Unexpected ')'")
    if tok_type is not None:
        raise TrailingInput(tok_val)
    return expr


def parse_all(source: str) -> list[SExpression]:
    """Read every form in `source`, in order."""
    return list(TokenStream(lex(source)).parse_all())

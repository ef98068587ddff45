"""Textual rendering of Lisp values.

Numbers, Symbols and Lists print in a form the reader accepts back;
procedures print as opaque markers.
"""

from io import StringIO

from tinylisp import LispValue
from tinylisp.types.builtin import Builtin
from tinylisp.types.lambda_fn import Lambda
from tinylisp.types.symbol import Symbol


def format_number(n: float) -> str:
    if n.is_integer():
        return str(int(n))
    return repr(n)


def _write(value: LispValue, buffer: StringIO) -> None:
    if isinstance(value, list):
        buffer.write("(")
        for i, item in enumerate(value):
            if i:
                buffer.write(" ")
            _write(item, buffer)
        buffer.write(")")
    elif isinstance(value, Symbol):
        buffer.write(value.id)
    elif isinstance(value, (int, float)):
        buffer.write(format_number(float(value)))
    elif isinstance(value, (Lambda, Builtin)):
        buffer.write(str(value))
    else:
        buffer.write(f"<unknown {value!r}>")


def to_string(value: LispValue) -> str:
    """Render `value` as text."""
    with StringIO() as buffer:
        _write(value, buffer)
        return buffer.getvalue()

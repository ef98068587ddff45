"""Error hierarchy for tinylisp.

Every failure raised by the reader or the evaluator is a LispError. Errors
carry their payload as attributes so callers can inspect them without
parsing the message.
"""


class LispError(Exception):
    """ Base class for all tinylisp errors"""
    pass


# -------------------------------
# Reader errors
# -------------------------------
class ReadError(LispError):
    """ Raised when source text cannot be read as a form"""
    pass


class EmptyInput(ReadError):
    """ Raised when there is no form to read"""

    def __init__(self, message: str = "Empty input"):
        super().__init__(message)


class UnmatchedParen(ReadError):
    """ Raised for a '(' without its ')' or a stray ')'"""

    def __init__(self, message: str = "Unmatched parenthesis"):
        super().__init__(message)


class InvalidAtom(ReadError):
    """ Raised when an atom looks like a number but is not one"""

    def __init__(self, token: str):
        super().__init__(f"Invalid atom '{token}'")
        self.token = token


class TrailingInput(ReadError):
    """ Raised when tokens remain after the first complete form"""

    def __init__(self, token: str):
        super().__init__(f"Unexpected input after form: '{token}'")
        self.token = token


# -------------------------------
# Evaluation errors
# -------------------------------
class EvalError(LispError):
    """ Raised when a form cannot be evaluated"""
    pass


class UnboundSymbol(EvalError):
    """ Raised when a symbol is used before it is bound"""

    def __init__(self, name):
        super().__init__(f"Unbound symbol '{name}'")
        self.name = name


class NotCallable(EvalError):
    """ Raised when the head of an application is not a procedure"""

    def __init__(self, value):
        from tinylisp.printer import to_string
        super().__init__(f"Not callable: {to_string(value)}")
        self.value = value


class ArityMismatch(EvalError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""

    def __init__(self, expected: int, got: int, what: str | None = None):
        prefix = f"{what}: " if what else ""
        super().__init__(f"{prefix}expected {expected} argument(s), got {got}")
        self.expected = expected
        self.got = got


class TypeMismatch(EvalError):
    """ Raised when an argument has the wrong kind of value"""

    def __init__(self, expected: str, got, what: str | None = None):
        from tinylisp.printer import to_string
        prefix = f"{what}: " if what else ""
        super().__init__(f"{prefix}expected {expected}, got {to_string(got)}")
        self.expected = expected
        self.got = got


class EmptyList(EvalError):
    """ Raised when first/rest is applied to the empty list"""

    def __init__(self, what: str | None = None):
        prefix = f"{what}: " if what else ""
        super().__init__(f"{prefix}empty list")


class RecursionDepthExceeded(EvalError):
    """ Raised when evaluation exhausts the native call stack"""

    def __init__(self, message: str = "Maximum recursion depth exceeded"):
        super().__init__(message)


class NumericOverflow(EvalError):
    """ Raised when arithmetic leaves the range of finite numbers"""

    def __init__(self, what: str | None = None):
        prefix = f"{what}: " if what else ""
        super().__init__(f"{prefix}numeric overflow")

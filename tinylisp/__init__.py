# Core type aliases for the tinylisp data model.
# Plain Python types represent both code (forms) and runtime values:
# floats are Numbers, lists are Lists (the empty list is nil), and Symbol,
# Lambda and Builtin are small classes under tinylisp.types.
#
# - SExpression: use in reader code to denote syntactic forms (code-as-data).
# - LispValue:   use in evaluator/runtime code to denote evaluated values.
# Both resolve to `Any` and are interchangeable.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function type, handed to special forms and the application engine
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"

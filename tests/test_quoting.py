import pytest

from tinylisp.errors import ArityMismatch
from tinylisp.evaluation.evaluator import evaluate
from tinylisp.types.symbol import Symbol


def test_quote_list(env):
    expr = [Symbol("quote"), [1.0, 2.0, 3.0]]
    assert evaluate(expr, env) == [1, 2, 3]


def test_quote_does_not_evaluate_elements(env):
    expr = [Symbol("quote"), [Symbol("unbound"), [Symbol("+"), 1.0]]]
    assert evaluate(expr, env) == [Symbol("unbound"), [Symbol("+"), 1.0]]


def test_quote_symbol_and_number(env):
    assert evaluate([Symbol("quote"), Symbol("x")], env) == Symbol("x")
    assert evaluate([Symbol("quote"), 42.0], env) == 42


def test_quoted_code_is_data(env):
    code = evaluate([Symbol("quote"), [Symbol("+"), 1.0, 2.0]], env)
    assert evaluate(code, env) == 3


@pytest.mark.parametrize("tail", [[], [Symbol("a"), Symbol("b")]])
def test_quote_arity(env, tail):
    with pytest.raises(ArityMismatch) as info:
        evaluate([Symbol("quote"), *tail], env)
    assert info.value.expected == 1
    assert info.value.got == len(tail)

import math

import pytest
from hypothesis import given, strategies as st

from tinylisp.errors import EmptyInput, InvalidAtom, TrailingInput, UnmatchedParen
from tinylisp.printer import to_string
from tinylisp.reader.parser import lex, parse, parse_all, tokenize
from tinylisp.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("atom", "a")]),
        ("(a b c)", [("lparen", "("), ("atom", "a"), ("atom", "b"), ("atom", "c"), ("rparen", ")")]),
        ("(+ 1 2)", [("lparen", "("), ("atom", "+"), ("atom", "1"), ("atom", "2"), ("rparen", ")")]),
        ("((a)b)", [("lparen", "("), ("lparen", "("), ("atom", "a"), ("rparen", ")"), ("atom", "b"), ("rparen", ")")]),
        ("  x \n\t y  ", [("atom", "x"), ("atom", "y")]),
        ("", []),
    ]
)
def test_lexer_basic(source, expected):
    assert list(lex(source)) == expected


def test_tokenize_splits_parens_from_atoms():
    assert tokenize("(first(list 1 2))") == ["(", "first", "(", "list", "1", "2", ")", ")"]


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", 123.0),
        ("-45", -45.0),
        ("+7", 7.0),
        ("3.14", 3.14),
        (".5", 0.5),
        ("1e3", 1000.0),
        ("foo", Symbol("foo")),
        ("+", Symbol("+")),
        ("-", Symbol("-")),
        ("number?", Symbol("number?")),
        ("inf", Symbol("inf")),
        ("nan", Symbol("nan")),
        ("()", []),
        ("(a (b 1) ())", [Symbol("a"), [Symbol("b"), 1.0], []]),
    ]
)
def test_parse_atoms_and_lists(source, expected):
    assert parse(source) == expected


def test_numbers_are_floats():
    assert isinstance(parse("42"), float)


def test_parse_ignores_surrounding_whitespace():
    assert parse("   (x)  \n") == [Symbol("x")]


@pytest.mark.parametrize("source", ["", "   ", "\n\t"])
def test_parse_empty_input(source):
    with pytest.raises(EmptyInput):
        parse(source)


@pytest.mark.parametrize("source", ["(", "(1 2", "((1) 2", ")", "(1))", ")("])
def test_parse_unmatched_paren(source):
    with pytest.raises(UnmatchedParen):
        parse(source)


@pytest.mark.parametrize("source", ["12abc", "1.2.3", "-5x", ".5.5", "1e", "1e400", "-1e400"])
def test_parse_invalid_atom(source):
    with pytest.raises(InvalidAtom):
        parse(source)


def test_parse_trailing_form_is_rejected():
    with pytest.raises(TrailingInput):
        parse("(a) b")


def test_parse_all_reads_every_form():
    assert parse_all("(def x 1) x 2") == [[Symbol("def"), Symbol("x"), 1.0], Symbol("x"), 2.0]
    assert parse_all("  ") == []
    with pytest.raises(UnmatchedParen):
        parse_all("(a) )")


# -----------------------------------------------------
# Round trip: parse(to_string(v)) == v
# -----------------------------------------------------
_symbols = st.from_regex(r"[a-z][a-z0-9?!*+-]{0,8}", fullmatch=True).map(Symbol)
# Neither the reader nor + ever produces a non-finite Number, so the values
# that can reach the printer are exactly the finite floats.
_numbers = st.floats(allow_nan=False, allow_infinity=False)
_values = st.recursive(
    st.one_of(_numbers, _symbols),
    lambda children: st.lists(children, max_size=5),
    max_leaves=25,
)


@given(_values)
def test_parse_is_left_inverse_of_printer(value):
    assert parse(to_string(value)) == value


@given(st.floats(allow_nan=False))
def test_number_literals_read_back_or_are_rejected(x):
    # a literal out of float range reads as an error, never as inf
    if math.isfinite(x):
        assert parse(repr(x)) == x
    else:
        with pytest.raises(InvalidAtom):
            parse(repr(x).replace("inf", "1e999"))


def test_inf_and_nan_words_are_symbols_not_numbers():
    assert parse("inf") == Symbol("inf")
    assert parse("-inf") == Symbol("-inf")

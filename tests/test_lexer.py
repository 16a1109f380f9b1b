from __future__ import annotations

import pytest

from calc.dsl.lexer import insert_implicit_mul, tokenize
from calc.dsl.tokens import (
    E,
    MINUS,
    PAREN_CLOSE,
    PAREN_OPEN,
    PI,
    PLUS,
    POW,
    SLASH,
    TIMES,
    UNARY_MINUS,
    UNARY_PLUS,
    number,
)
from calc.errors import LexError


@pytest.mark.parametrize(
    "text, value",
    [
        ("0", 0.0),
        ("12", 12.0),
        ("012.345", 12.345),
        ("12.", 12.0),
        (".4", 0.4),
        ("3.14159", 3.14159),
    ],
)
def test_tokenize_numbers(text: str, value: float) -> None:
    assert tokenize(text) == [number(value)]


def test_tokenize_lone_dot_fails() -> None:
    with pytest.raises(LexError) as excinfo:
        tokenize(".")
    assert excinfo.value.fragment == "."
    assert excinfo.value.position == 0


def test_tokenize_operators() -> None:
    tokens = tokenize("+2+-1-*/***", implicit_mul=False)
    assert tokens == [
        UNARY_PLUS,
        number(2),
        PLUS,
        UNARY_MINUS,
        number(1),
        MINUS,
        TIMES,
        SLASH,
        POW,
        TIMES,
    ]


def test_tokenize_whitespace_only() -> None:
    assert tokenize(" \n\t") == []
    assert tokenize("") == []


def test_tokenize_constants() -> None:
    assert tokenize("pi", implicit_mul=False) == [PI]
    assert tokenize("e", implicit_mul=False) == [E]
    assert tokenize("E", implicit_mul=False) == [E]
    assert tokenize("pie", implicit_mul=False) == [PI, E]


@pytest.mark.parametrize("text, fragment", [("abc", "a"), ("%", "%"), ("1 # 2", "#"), ("PI", "P")])
def test_tokenize_unexpected_character(text: str, fragment: str) -> None:
    with pytest.raises(LexError) as excinfo:
        tokenize(text)
    assert excinfo.value.fragment == fragment


def test_tokenize_malformed_pi() -> None:
    with pytest.raises(LexError):
        tokenize("2*p")
    with pytest.raises(LexError) as excinfo:
        tokenize("px")
    assert excinfo.value.fragment == "px"


def test_unary_disambiguation() -> None:
    assert tokenize("1--1") == [number(1), MINUS, UNARY_MINUS, number(1)]
    assert tokenize("-1") == [UNARY_MINUS, number(1)]
    assert tokenize("+1") == [UNARY_PLUS, number(1)]
    assert tokenize("(-1)") == [PAREN_OPEN, UNARY_MINUS, number(1), PAREN_CLOSE]
    assert tokenize("2*-e") == [number(2), TIMES, UNARY_MINUS, E]
    assert tokenize("(1)-1") == [PAREN_OPEN, number(1), PAREN_CLOSE, MINUS, number(1)]
    assert tokenize("pi+e") == [PI, PLUS, E]


def test_implicit_mul_matches_explicit() -> None:
    assert tokenize("2pi") == tokenize("2*pi") == [number(2), TIMES, PI]
    assert tokenize("pie") == [PI, TIMES, E]
    assert tokenize("1(2)") == [number(1), TIMES, PAREN_OPEN, number(2), PAREN_CLOSE]


def test_implicit_mul_between_groups() -> None:
    tokens = tokenize("(1)(2)")
    assert tokens == [PAREN_OPEN, number(1), PAREN_CLOSE, TIMES, PAREN_OPEN, number(2), PAREN_CLOSE]
    assert tokens.count(TIMES) == 1


def test_implicit_mul_adjacent_numbers() -> None:
    assert tokenize("1 2") == [number(1), TIMES, number(2)]
    assert tokenize("1 2", implicit_mul=False) == [number(1), number(2)]
    assert tokenize("1.2.3") == [number(1.2), TIMES, number(0.3)]


def test_implicit_mul_leaves_operators_alone() -> None:
    tokens = [number(1), PLUS, PAREN_OPEN, number(2), PAREN_CLOSE]
    assert insert_implicit_mul(tokens) == tokens
    assert insert_implicit_mul([]) == []

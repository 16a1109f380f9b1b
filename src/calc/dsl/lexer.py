from __future__ import annotations

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
    Token,
    number,
)
from calc.errors import LexError

_DIGITS = "0123456789"

_SINGLE_CHAR = {
    "/": SLASH,
    "(": PAREN_OPEN,
    ")": PAREN_CLOSE,
    "e": E,
    "E": E,
}


def _read_digits(source: str, i: int) -> int:
    while i < len(source) and source[i] in _DIGITS:
        i += 1
    return i


def _read_number(source: str, start: int) -> tuple[Token, int]:
    # <number> ::= <digits> [ "." [ <digits> ] ] | "." <digits>
    if source[start] == ".":
        end = _read_digits(source, start + 1)
        if end == start + 1:
            raise LexError("a single dot is not a valid number", ".", start)
    else:
        end = _read_digits(source, start)
        if end < len(source) and source[end] == ".":
            end = _read_digits(source, end + 1)
    return number(float(source[start:end])), end


def _sign(prev: Token | None, unary: Token, binary: Token) -> Token:
    if prev is None or prev.is_before_unary():
        return unary
    return binary


def insert_implicit_mul(tokens: list[Token]) -> list[Token]:
    out: list[Token] = []
    for tok in tokens:
        if out and out[-1].ends_operand() and tok.starts_operand():
            out.append(TIMES)
        out.append(tok)
    return out


def tokenize(source: str, implicit_mul: bool = True) -> list[Token]:
    tokens: list[Token] = []
    i = 0
    while i < len(source):
        ch = source[i]
        if ch.isspace():
            i += 1
            continue
        if ch in _DIGITS or ch == ".":
            tok, i = _read_number(source, i)
            tokens.append(tok)
            continue
        prev = tokens[-1] if tokens else None
        if ch == "+":
            tokens.append(_sign(prev, UNARY_PLUS, PLUS))
        elif ch == "-":
            tokens.append(_sign(prev, UNARY_MINUS, MINUS))
        elif ch == "*":
            if source.startswith("*", i + 1):
                tokens.append(POW)
                i += 1
            else:
                tokens.append(TIMES)
        elif ch == "p":
            if not source.startswith("i", i + 1):
                raise LexError("expected 'pi'", source[i : i + 2], i)
            tokens.append(PI)
            i += 1
        elif ch in _SINGLE_CHAR:
            tokens.append(_SINGLE_CHAR[ch])
        else:
            raise LexError(f"unexpected character {ch!r}", ch, i)
        i += 1
    if implicit_mul:
        return insert_implicit_mul(tokens)
    return tokens

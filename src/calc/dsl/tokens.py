from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    PLUS = "+"
    MINUS = "-"
    UNARY_PLUS = "u+"
    UNARY_MINUS = "u-"
    TIMES = "*"
    POW = "**"
    SLASH = "/"
    PAREN_OPEN = "("
    PAREN_CLOSE = ")"
    E = "e"
    PI = "pi"
    NUMBER = "num"


ATOM_KINDS = frozenset({TokenKind.NUMBER, TokenKind.E, TokenKind.PI})
UNARY_KINDS = frozenset({TokenKind.UNARY_PLUS, TokenKind.UNARY_MINUS})

# Higher binds tighter.
PRECEDENCE = {
    TokenKind.UNARY_PLUS: 4,
    TokenKind.UNARY_MINUS: 4,
    TokenKind.POW: 3,
    TokenKind.TIMES: 2,
    TokenKind.SLASH: 2,
    TokenKind.PLUS: 1,
    TokenKind.MINUS: 1,
}

RIGHT_ASSOC_KINDS = frozenset({TokenKind.POW, TokenKind.UNARY_PLUS, TokenKind.UNARY_MINUS})


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: float | None = None

    def is_atom(self) -> bool:
        return self.kind in ATOM_KINDS

    def is_op(self) -> bool:
        return self.kind in PRECEDENCE

    def is_unary(self) -> bool:
        return self.kind in UNARY_KINDS

    @property
    def precedence(self) -> int:
        return PRECEDENCE.get(self.kind, 0)

    def is_left_assoc(self) -> bool:
        return self.is_op() and self.kind not in RIGHT_ASSOC_KINDS

    def is_before_unary(self) -> bool:
        return self.is_op() or self.kind is TokenKind.PAREN_OPEN

    def ends_operand(self) -> bool:
        return self.is_atom() or self.kind is TokenKind.PAREN_CLOSE

    def starts_operand(self) -> bool:
        return self.is_atom() or self.kind is TokenKind.PAREN_OPEN

    @property
    def symbol(self) -> str:
        if self.kind is TokenKind.NUMBER:
            return repr(self.value)
        if self.is_unary():
            return self.kind.value[1:]
        return self.kind.value

    def __repr__(self) -> str:
        if self.kind is TokenKind.NUMBER:
            return f"Number({self.value!r})"
        return self.kind.name


def number(value: float) -> Token:
    return Token(TokenKind.NUMBER, float(value))


PLUS = Token(TokenKind.PLUS)
MINUS = Token(TokenKind.MINUS)
UNARY_PLUS = Token(TokenKind.UNARY_PLUS)
UNARY_MINUS = Token(TokenKind.UNARY_MINUS)
TIMES = Token(TokenKind.TIMES)
POW = Token(TokenKind.POW)
SLASH = Token(TokenKind.SLASH)
PAREN_OPEN = Token(TokenKind.PAREN_OPEN)
PAREN_CLOSE = Token(TokenKind.PAREN_CLOSE)
E = Token(TokenKind.E)
PI = Token(TokenKind.PI)


def token_labels(tokens: list[Token]) -> list[str]:
    return [repr(tok.value) if tok.kind is TokenKind.NUMBER else tok.kind.value for tok in tokens]

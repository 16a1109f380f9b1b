from __future__ import annotations

from calc.dsl.expr import BinaryOp, BinOpKind, E, Expr, Number, Pi, UnaryOp, UnaryOpKind
from calc.dsl.tokens import Token, TokenKind
from calc.errors import MismatchedParenthesis, NotEnoughOperands, TooMuchOperands

_BINARY_KINDS = {
    TokenKind.PLUS: BinOpKind.ADD,
    TokenKind.MINUS: BinOpKind.SUB,
    TokenKind.TIMES: BinOpKind.MUL,
    TokenKind.SLASH: BinOpKind.DIV,
    TokenKind.POW: BinOpKind.POW,
}

_UNARY_KINDS = {
    TokenKind.UNARY_PLUS: UnaryOpKind.IDENTITY,
    TokenKind.UNARY_MINUS: UnaryOpKind.NEGATE,
}


def _leaf(tok: Token) -> Expr:
    if tok.kind is TokenKind.NUMBER:
        return Number(float(tok.value))
    if tok.kind is TokenKind.E:
        return E()
    return Pi()


class Parser:
    """Shunting-yard parser.

    ``output`` holds finished subtrees, ``operators`` holds pending operators and open
    parentheses. Operators are reduced into ``output`` as soon as precedence allows, so
    no partially built node ever leaves this class.
    """

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = list(tokens)
        self.output: list[Expr] = []
        self.operators: list[Token] = []

    def parse(self) -> Expr:
        for tok in self.tokens:
            if tok.is_atom():
                self.output.append(_leaf(tok))
            elif tok.is_op():
                self.push_op(tok)
            elif tok.kind is TokenKind.PAREN_OPEN:
                self.operators.append(tok)
            elif tok.kind is TokenKind.PAREN_CLOSE:
                self.close_paren()
            else:
                raise ValueError(f"Unexpected token: {tok!r}")
        while self.operators:
            top = self.operators.pop()
            if top.kind is TokenKind.PAREN_OPEN:
                raise MismatchedParenthesis("Mismatched parenthesis: '(' is never closed")
            self.apply_op(top)
        if not self.output:
            raise NotEnoughOperands("Not enough operands in the expression")
        if len(self.output) > 1:
            raise TooMuchOperands(
                f"Too much operands in the expression: {len(self.output)} values are not joined by an operator"
            )
        return self.output[0]

    def _should_pop(self, top: Token, incoming: Token) -> bool:
        if top.kind is TokenKind.PAREN_OPEN:
            return False
        # A prefix operator has no left operand yet, so nothing can be reduced before it.
        if incoming.is_unary():
            return False
        if top.precedence > incoming.precedence:
            return True
        return top.precedence == incoming.precedence and incoming.is_left_assoc()

    def push_op(self, tok: Token) -> None:
        while self.operators and self._should_pop(self.operators[-1], tok):
            self.apply_op(self.operators.pop())
        self.operators.append(tok)

    def close_paren(self) -> None:
        while self.operators:
            top = self.operators.pop()
            if top.kind is TokenKind.PAREN_OPEN:
                return
            self.apply_op(top)
        raise MismatchedParenthesis("Mismatched parenthesis: ')' has no matching '('")

    def _pop_operand(self, op: Token) -> Expr:
        if not self.output:
            raise NotEnoughOperands(f"Not enough operands for operator '{op.symbol}'")
        return self.output.pop()

    def apply_op(self, op: Token) -> None:
        if op.is_unary():
            operand = self._pop_operand(op)
            self.output.append(UnaryOp(_UNARY_KINDS[op.kind], operand))
            return
        right = self._pop_operand(op)
        left = self._pop_operand(op)
        self.output.append(BinaryOp(left, _BINARY_KINDS[op.kind], right))


def parse(tokens: list[Token]) -> Expr:
    return Parser(tokens).parse()

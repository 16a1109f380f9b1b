from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

import numpy as np


class BinOpKind(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    POW = "**"


class UnaryOpKind(Enum):
    NEGATE = "-"
    IDENTITY = "+"


@dataclass(frozen=True)
class Number:
    value: float


@dataclass(frozen=True)
class E:
    pass


@dataclass(frozen=True)
class Pi:
    pass


@dataclass(frozen=True)
class UnaryOp:
    kind: UnaryOpKind
    operand: Expr

    def __post_init__(self) -> None:
        _check_child(self.operand, "operand")


@dataclass(frozen=True)
class BinaryOp:
    left: Expr
    kind: BinOpKind
    right: Expr

    def __post_init__(self) -> None:
        _check_child(self.left, "left")
        _check_child(self.right, "right")


Expr = Number | E | Pi | UnaryOp | BinaryOp

_NODE_TYPES = (Number, E, Pi, UnaryOp, BinaryOp)


def _check_child(node: object, name: str) -> None:
    if not isinstance(node, _NODE_TYPES):
        raise TypeError(f"{name} must be an expression node, got {type(node).__name__}")


def _format_number(value: float) -> str:
    # Positional only: "1e-05" would lex as 1 * e - 05.
    if not math.isfinite(value):
        # A literal too long for a float parses to inf; the grammar has no spelling for it.
        return "inf" if value > 0 else ("-inf" if value < 0 else "nan")
    return np.format_float_positional(value, trim="-")


def _render_leaf(node: Expr) -> str:
    if isinstance(node, Number):
        return _format_number(node.value)
    if isinstance(node, E):
        return "e"
    if isinstance(node, Pi):
        return "pi"
    raise TypeError(f"Invalid AST node: {node!r}")


def render(expr: Expr) -> str:
    """Render a tree in a fully parenthesized form that tokenizes back to the same tree.

    Binary nodes print as ``(left op right)``, unary nodes as ``(-operand)``. The walk
    uses an explicit stack, pieces are pushed in reverse order of output.

    Only trees with finite number literals tokenize back; a non-finite ``Number`` prints
    as ``inf``, ``-inf`` or ``nan``, which the lexer rejects.
    """
    parts: list[str] = []
    stack: list[Expr | str] = [expr]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, UnaryOp):
            stack.extend([")", item.operand, "(" + item.kind.value])
        elif isinstance(item, BinaryOp):
            stack.extend([")", item.right, f" {item.kind.value} ", item.left, "("])
        else:
            parts.append(_render_leaf(item))
    return "".join(parts)

from __future__ import annotations

import math
import operator
from typing import Any

import numpy as np

from calc.dsl.expr import BinaryOp, BinOpKind, E, Expr, Number, Pi, UnaryOp, UnaryOpKind

PRECISIONS = {
    "f64": np.float64,
    "f32": np.float32,
}

_BIN_OPS = {
    BinOpKind.ADD: operator.add,
    BinOpKind.SUB: operator.sub,
    BinOpKind.MUL: operator.mul,
    BinOpKind.DIV: operator.truediv,
    BinOpKind.POW: operator.pow,
}

_UNARY_OPS = {
    UnaryOpKind.NEGATE: operator.neg,
    UnaryOpKind.IDENTITY: operator.pos,
}


def resolve_precision(precision: str) -> type[np.floating]:
    if precision not in PRECISIONS:
        raise ValueError(f"Unknown precision: {precision}")
    return PRECISIONS[precision]


class Interpreter:
    def __init__(self, precision: str = "f64") -> None:
        self.precision = precision
        self.dtype = resolve_precision(precision)

    def evaluate(self, expr: Expr) -> float:
        # IEEE semantics: 1/0 -> inf, (-8)**(1/3) -> nan, no floating point exceptions.
        with np.errstate(all="ignore"):
            return float(self._eval(expr))

    def _leaf(self, node: Expr) -> Any:
        if isinstance(node, Number):
            return self.dtype(node.value)
        if isinstance(node, E):
            return self.dtype(math.e)
        if isinstance(node, Pi):
            return self.dtype(math.pi)
        raise TypeError(f"Invalid AST node: {node!r}")

    def _eval(self, root: Expr) -> Any:
        values: list[Any] = []
        # (node, children_done); children are evaluated before their parent is reduced.
        stack: list[tuple[Expr, bool]] = [(root, False)]
        while stack:
            node, children_done = stack.pop()
            if isinstance(node, BinaryOp):
                if children_done:
                    right = values.pop()
                    left = values.pop()
                    values.append(_BIN_OPS[node.kind](left, right))
                else:
                    stack.append((node, True))
                    stack.append((node.right, False))
                    stack.append((node.left, False))
            elif isinstance(node, UnaryOp):
                if children_done:
                    values.append(_UNARY_OPS[node.kind](values.pop()))
                else:
                    stack.append((node, True))
                    stack.append((node.operand, False))
            else:
                values.append(self._leaf(node))
        return values[0]


def evaluate(expr: Expr, precision: str = "f64") -> float:
    return Interpreter(precision).evaluate(expr)

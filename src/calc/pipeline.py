from __future__ import annotations

import logging

from pydantic import BaseModel

from calc.config import CalcConfig
from calc.dsl.expr import Expr, render
from calc.dsl.lexer import tokenize
from calc.dsl.parser import parse
from calc.dsl.tokens import Token, token_labels
from calc.interp.core import Interpreter

logger = logging.getLogger(__name__)


class CalcResult(BaseModel):
    expression: str
    tokens: list[str]
    tree: str
    value: float
    precision: str


def _stages(text: str, config: CalcConfig) -> tuple[list[Token], Expr, float]:
    tokens = tokenize(text, implicit_mul=config.implicit_mul)
    logger.debug("tokenize tokens=%d expr=%r", len(tokens), text)
    tree = parse(tokens)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("parse tree=%s", render(tree))
    value = Interpreter(config.precision).evaluate(tree)
    logger.debug("evaluate precision=%s value=%r", config.precision, value)
    return tokens, tree, value


def calculate(text: str, config: CalcConfig | None = None) -> float:
    _, _, value = _stages(text, config or CalcConfig())
    return value


def run(text: str, config: CalcConfig | None = None) -> CalcResult:
    config = config or CalcConfig()
    tokens, tree, value = _stages(text, config)
    return CalcResult(
        expression=text,
        tokens=token_labels(tokens),
        tree=render(tree),
        value=value,
        precision=config.precision,
    )

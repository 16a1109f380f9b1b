"""Arithmetic expression evaluator: tokenize, shunting-yard parse, evaluate."""

from calc.dsl.lexer import tokenize
from calc.dsl.parser import parse
from calc.interp.core import evaluate
from calc.pipeline import calculate

__version__ = "0.1.0"

__all__ = ["tokenize", "parse", "evaluate", "calculate", "__version__"]

from calc.dsl.lexer import tokenize
from calc.dsl.parser import parse

__all__ = ["tokenize", "parse"]

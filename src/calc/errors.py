from __future__ import annotations


class CalcError(ValueError):
    pass


class LexError(CalcError):
    def __init__(self, message: str, fragment: str = "", position: int | None = None) -> None:
        if position is not None:
            message = f"{message} at position {position}"
        super().__init__(message)
        self.fragment = fragment
        self.position = position


class ParseError(CalcError):
    pass


class MismatchedParenthesis(ParseError):
    pass


class NotEnoughOperands(ParseError):
    pass


class TooMuchOperands(ParseError):
    pass

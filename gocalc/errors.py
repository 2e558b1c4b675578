from typing import Optional

from gocalc.token import Token, TokenType


class CalcError(Exception):
    """Base class for errors raised while reading a single line."""

    location: Optional[int] = None


class LexError(CalcError):
    def __init__(self, character: str, location: int) -> None:
        super().__init__(f"Unknown character {character}")
        self.character = character
        self.location = location


class ParseError(CalcError):
    """The lookahead token does not fit the grammar rule being parsed."""

    def __init__(self, token: Token, expected: Optional[TokenType] = None) -> None:
        super().__init__("Syntax error")
        self.token = token
        self.expected = expected
        self.location = token.location

    @property
    def detail(self) -> str:
        found = self.token.kind.name
        if self.expected is None:
            return f"unexpected {found}"
        return f"expected {self.expected.name}, found {found}"


class LiteralError(CalcError):
    """An integer literal has more digits than ``int`` will convert."""

    def __init__(self, text: str, location: int) -> None:
        super().__init__(f"Integer literal too long ({len(text)} digits)")
        self.text = text
        self.location = location


class NestingError(CalcError):
    def __init__(self, token: Token, limit: int) -> None:
        super().__init__(f"Expression nested deeper than {limit} parentheses")
        self.token = token
        self.limit = limit
        self.location = token.location

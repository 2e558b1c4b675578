from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class TokenType(IntEnum):
    Integer = 1
    Plus = 2
    Minus = 3
    Multiply = 4
    Divide = 5
    LeftParen = 6
    RightParen = 7
    EOF = 8


PUNCTUATORS = {
    "+": TokenType.Plus,
    "-": TokenType.Minus,
    "*": TokenType.Multiply,
    "/": TokenType.Divide,
    "(": TokenType.LeftParen,
    ")": TokenType.RightParen,
}


@dataclass(frozen=True)
class Token:
    kind: TokenType
    text: str = ""
    value: Optional[int] = None
    location: int = 0


def new_token(
    kind: TokenType, expression: str, start: int, end: int, value: Optional[int] = None
) -> Token:
    return Token(kind, expression[start:end], value, start)


def equal(token: Token, kind: TokenType) -> bool:
    return token.kind == kind

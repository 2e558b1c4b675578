import logging
from typing import Iterator, Optional

from gocalc.errors import LexError, LiteralError
from gocalc.token import PUNCTUATORS, Token, TokenType, new_token

logger = logging.getLogger(__name__)


class Tokenizer:
    text: str
    position: int
    current_char: Optional[str]

    def __init__(self, text: str) -> None:
        self.text = text
        self.position = 0
        self.current_char = text[0] if text else None

    def advance(self) -> None:
        self.position += 1
        if self.position < len(self.text):
            self.current_char = self.text[self.position]
        else:
            self.current_char = None

    def skip_whitespace(self) -> None:
        # Only the space character counts; tabs are rejected as unknown.
        while self.current_char == " ":
            self.advance()

    def integer(self) -> Token:
        start = self.position
        while self.current_char is not None and self.current_char in "0123456789":
            self.advance()
        text = self.text[start : self.position]
        try:
            value = int(text)
        except ValueError as error:
            # sys.get_int_max_str_digits() caps the length of a decimal string
            raise LiteralError(text, start) from error
        return new_token(TokenType.Integer, self.text, start, self.position, value)

    def next_token(self) -> Token:
        self.skip_whitespace()
        if self.current_char is None:
            return new_token(TokenType.EOF, self.text, self.position, self.position)
        if self.current_char in "0123456789":
            token = self.integer()
        elif (kind := PUNCTUATORS.get(self.current_char)) is not None:
            token = new_token(kind, self.text, self.position, self.position + 1)
            self.advance()
        else:
            raise LexError(self.current_char, self.position)
        logger.debug("token %s %r at %d", token.kind.name, token.text, token.location)
        return token

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.kind == TokenType.EOF:
                return


def tokenize(text: str) -> list[Token]:
    return list(Tokenizer(text))

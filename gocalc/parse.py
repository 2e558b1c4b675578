import logging

from gocalc.errors import NestingError, ParseError
from gocalc.node import Node, new_binary, new_number
from gocalc.token import Token, TokenType, equal
from gocalc.tokenize import Tokenizer

logger = logging.getLogger(__name__)

ADDITIVE = (TokenType.Plus, TokenType.Minus)
MULTIPLICATIVE = (TokenType.Multiply, TokenType.Divide)

# Each level of parentheses costs three Python frames (factor, expr, term).
MAX_DEPTH = 200


class Parser:
    """Recursive descent over a single line.

    expr   := term ((PLUS | MINUS) term)*
    term   := factor ((MUL | DIV) factor)*
    factor := INTEGER | LPAREN expr RPAREN

    When ``strict`` is false, tokens left over after a complete expression
    are ignored, so ``1 2`` parses as ``1``.
    """

    tokenizer: Tokenizer
    current_token: Token

    def __init__(self, tokenizer: Tokenizer, strict: bool = False) -> None:
        self.tokenizer = tokenizer
        self.strict = strict
        self.depth = 0
        self.current_token = self.tokenizer.next_token()

    def eat(self, kind: TokenType) -> Token:
        token = self.current_token
        if not equal(token, kind):
            raise ParseError(token, kind)
        self.current_token = self.tokenizer.next_token()
        return token

    def factor(self) -> Node:
        if equal(self.current_token, TokenType.LeftParen):
            token = self.eat(TokenType.LeftParen)
            if self.depth >= MAX_DEPTH:
                raise NestingError(token, MAX_DEPTH)
            self.depth += 1
            node = self.expr()
            self.eat(TokenType.RightParen)
            self.depth -= 1
            return node
        return new_number(self.eat(TokenType.Integer))

    def term(self) -> Node:
        node = self.factor()
        while self.current_token.kind in MULTIPLICATIVE:
            token = self.eat(self.current_token.kind)
            node = new_binary(token, node, self.factor())
        return node

    def expr(self) -> Node:
        node = self.term()
        while self.current_token.kind in ADDITIVE:
            token = self.eat(self.current_token.kind)
            node = new_binary(token, node, self.term())
        return node

    def parse(self) -> Node:
        node = self.expr()
        if self.strict:
            self.eat(TokenType.EOF)
        elif not equal(self.current_token, TokenType.EOF):
            logger.debug(
                "ignoring trailing input from %d: %r",
                self.current_token.location,
                self.tokenizer.text[self.current_token.location :],
            )
        return node

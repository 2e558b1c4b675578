from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Union

from gocalc.token import Token, TokenType


class NodeKind(IntEnum):
    Add = 1
    Sub = 2
    Mul = 3
    Div = 4
    Number = 5


OPERATORS = {
    TokenType.Plus: NodeKind.Add,
    TokenType.Minus: NodeKind.Sub,
    TokenType.Multiply: NodeKind.Mul,
    TokenType.Divide: NodeKind.Div,
}


@dataclass(frozen=True)
class Literal:
    value: int
    token: Optional[Token] = None

    @property
    def kind(self) -> NodeKind:
        return NodeKind.Number


@dataclass(frozen=True)
class BinaryOp:
    kind: NodeKind
    operator: str
    left: "Node"
    right: "Node"
    token: Optional[Token] = None

    def __post_init__(self) -> None:
        if self.left is None or self.right is None:
            raise ValueError(f"binary {self.operator!r} needs two operands")


Node = Union[Literal, BinaryOp]


def new_number(token: Token) -> Literal:
    if token.kind != TokenType.Integer:
        raise ValueError(f"expected an integer token, got {token.kind.name}")
    return Literal(token.value, token)


def new_binary(token: Token, left: Node, right: Node) -> BinaryOp:
    try:
        kind = OPERATORS[token.kind]
    except KeyError:
        raise ValueError(f"{token.kind.name} is not a binary operator") from None
    return BinaryOp(kind, token.text, left, right, token)

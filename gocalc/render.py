from typing import Iterable, Union

from gocalc.node import BinaryOp, Literal, Node
from gocalc.token import Token, TokenType


def render(node: Node) -> str:
    # Explicit stack: a long operator chain is as deep as it is wide.
    parts: list[str] = []
    stack: list[Union[Node, tuple[str]]] = [node]
    while stack:
        match stack.pop():
            case (str() as text,):
                parts.append(text)
            case Literal(value=value):
                parts.append(str(value))
            case BinaryOp(operator=operator, left=left, right=right):
                stack.extend([(")",), right, (" ",), left, (f"({operator} ",)])
            case other:
                raise TypeError(f"invalid node {other!r}")
    return "".join(parts)


def render_token(token: Token) -> str:
    if token.kind == TokenType.EOF:
        return token.kind.name
    return f"{token.kind.name} {token.text}"


def render_tokens(tokens: Iterable[Token]) -> str:
    return "\n".join(render_token(token) for token in tokens)

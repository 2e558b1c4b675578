"""Run one line through tokenizer, parser and renderer.

``interpret`` never lets a ``CalcError`` escape; it hands back a ``Failure``
so the caller can print a diagnostic and move on to the next line.
"""
import logging
from dataclasses import dataclass
from typing import Union

from gocalc.errors import CalcError
from gocalc.node import Node
from gocalc.parse import Parser
from gocalc.render import render
from gocalc.tokenize import Tokenizer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Success:
    tree: Node
    text: str


@dataclass(frozen=True)
class Failure:
    error: CalcError

    @property
    def message(self) -> str:
        return str(self.error)


Outcome = Union[Success, Failure]


def interpret_or_raise(line: str, strict: bool = False) -> str:
    tree = Parser(Tokenizer(line), strict=strict).parse()
    return render(tree)


def interpret(line: str, strict: bool = False) -> Outcome:
    try:
        tree = Parser(Tokenizer(line), strict=strict).parse()
    except CalcError as error:
        logger.debug("failed to read %r: %s", line, error)
        return Failure(error)
    return Success(tree, render(tree))

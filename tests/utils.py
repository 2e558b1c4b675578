from gocalc.parse import Parser
from gocalc.render import render
from gocalc.tokenize import Tokenizer


def parse_text(text: str, strict: bool = False):
    """Tokenize and parse a line into a tree."""
    return Parser(Tokenizer(text), strict=strict).parse()


def render_text(text: str, strict: bool = False) -> str:
    return render(parse_text(text, strict=strict))

import logging
import sys
from typing import Iterator, TextIO

import click

from gocalc.errors import CalcError
from gocalc.helper import describe_error
from gocalc.pipeline import Failure, interpret
from gocalc.render import render_token
from gocalc.tokenize import Tokenizer

logger = logging.getLogger(__name__)

PROMPT = "goCalc> "


def read_lines(stream: TextIO, prompt: str) -> Iterator[str]:
    while True:
        click.echo(prompt, nl=False)
        line = stream.readline()
        if not line:
            return
        yield line.rstrip("\r\n")


def report(line: str, error: CalcError, show_location: bool) -> None:
    if show_location:
        click.echo(describe_error(line, error))
    else:
        click.echo(str(error))


def show_tokens(line: str) -> None:
    """Print tokens up to the first one the tokenizer rejects.

    The parser may stop before reaching a bad character, so a failure here
    is left for ``interpret`` to report or ignore.
    """
    try:
        for token in Tokenizer(line):
            click.echo(render_token(token))
    except CalcError as error:
        logger.debug("token dump stopped at %s: %s", error.location, error)


def run_line(line: str, strict: bool, show_location: bool, dump_tokens: bool) -> bool:
    if dump_tokens:
        show_tokens(line)
    outcome = interpret(line, strict=strict)
    if isinstance(outcome, Failure):
        report(line, outcome.error, show_location)
        return False
    click.echo(outcome.text)
    return True


@click.command()
@click.option(
    "-i",
    "--input",
    "input_file",
    type=click.File("r"),
    default="-",
    help="Read expressions from FILE instead of standard input.",
)
@click.option(
    "-e",
    "--expression",
    "expressions",
    multiple=True,
    help="Render EXPRESSION and exit. May be given more than once.",
)
@click.option("--prompt", default=PROMPT, show_default=True)
@click.option(
    "--keep-going/--fail-fast",
    default=True,
    help="Continue with the next line after an error, or exit with status 1.",
)
@click.option("--strict", is_flag=True, help="Reject input left over after the expression.")
@click.option("--show-location", is_flag=True, help="Point at the offending character.")
@click.option("--tokens", "dump_tokens", is_flag=True, help="Print tokens before the tree.")
@click.option("-v", "--verbose", is_flag=True)
def main(
    input_file: TextIO,
    expressions: tuple[str, ...],
    prompt: str,
    keep_going: bool,
    strict: bool,
    show_location: bool,
    dump_tokens: bool,
    verbose: bool,
):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if expressions:
        failed = False
        for expression in expressions:
            if not run_line(expression, strict, show_location, dump_tokens):
                failed = True
                if not keep_going:
                    break
        sys.exit(1 if failed else 0)

    for line in read_lines(input_file, prompt):
        if not line:
            continue
        if not run_line(line, strict, show_location, dump_tokens) and not keep_going:
            logger.debug("stopping after error")
            sys.exit(1)


if __name__ == "__main__":
    main()

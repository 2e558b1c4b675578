import typer

from gocalc.errors import CalcError
from gocalc.helper import describe_error
from gocalc.pipeline import interpret_or_raise
from gocalc.render import render_tokens
from gocalc.tokenize import tokenize

app = typer.Typer(add_completion=False)


def fail(expression: str, error: CalcError, show_location: bool) -> typer.Exit:
    if show_location:
        typer.echo(describe_error(expression, error))
    else:
        typer.echo(str(error))
    return typer.Exit(code=1)


@app.command(context_settings={"ignore_unknown_options": True})
def render(
    expression: str,
    strict: bool = typer.Option(False, help="Reject input left over after the expression."),
    show_location: bool = typer.Option(False, help="Point at the offending character."),
):
    """Print the parenthesized prefix form of EXPRESSION."""
    try:
        result = interpret_or_raise(expression, strict=strict)
    except CalcError as error:
        raise fail(expression, error, show_location) from error
    typer.echo(result)


@app.command(context_settings={"ignore_unknown_options": True})
def tokens(
    expression: str,
    show_location: bool = typer.Option(False, help="Point at the offending character."),
):
    """Print the tokens of EXPRESSION, one per line."""
    try:
        result = render_tokens(tokenize(expression))
    except CalcError as error:
        raise fail(expression, error, show_location) from error
    typer.echo(result)


if __name__ == "__main__":
    app()

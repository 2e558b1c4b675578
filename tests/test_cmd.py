from typer.testing import CliRunner

from gocalc.cmd.main import app

runner = CliRunner()


def test_render_command():
    result = runner.invoke(app, ["render", "(1 + 2) * 3"])
    assert result.exit_code == 0
    assert result.output == "(* (+ 1 2) 3)\n"


def test_render_command_errors():
    result = runner.invoke(app, ["render", "1 @"])
    assert result.exit_code == 1
    assert result.output == "Unknown character @\n"

    result = runner.invoke(app, ["render", "--strict", "1 2"])
    assert result.exit_code == 1
    assert result.output == "Syntax error\n"


def test_render_command_show_location():
    result = runner.invoke(app, ["render", "--show-location", "(1"])
    assert result.exit_code == 1
    assert result.output == "(1\n  ^ Syntax error: expected RightParen, found EOF\n"


def test_tokens_command():
    result = runner.invoke(app, ["tokens", "3 / 4"])
    assert result.exit_code == 0
    assert result.output == "Integer 3\nDivide /\nInteger 4\nEOF\n"

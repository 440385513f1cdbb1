import logging

from click.testing import CliRunner

from moonlex import cli


def test_cli_tokenize():
    result = CliRunner().invoke(cli, ["tokenize", "local x = 12"])
    assert result.exit_code == 0
    assert result.output.split("\n")[:4] == [
        "Keyword(Local)",
        "Identifier('x')",
        "Assign",
        "NumberLiteral(12)",
    ]


def test_cli_tokenize_overflow():
    result = CliRunner().invoke(cli, ["tokenize", "99999999999"])
    assert result.exit_code == 1
    assert "32-bit" in result.output


def test_cli_scan_default_file():
    runner = CliRunner()
    with runner.isolated_filesystem():
        with open("isolated.txt", "w") as f:
            f.write("function f() end\n")
        result = runner.invoke(cli, ["scan", "--no-print-source"])
    assert result.exit_code == 0
    assert result.output.split("\n")[:5] == [
        "Keyword(Function)",
        "Identifier('f')",
        "LeftParenthesis",
        "RightParenthesis",
        "Keyword(End)",
    ]


def test_cli_scan_missing_file():
    runner = CliRunner()
    with runner.isolated_filesystem():
        result = runner.invoke(cli, ["scan", "nope.lua"])
    assert result.exit_code == 2


def test_cli_tokenize_verbose(caplog):
    caplog.set_level(logging.WARNING)
    result = CliRunner().invoke(cli, ["tokenize", "--verbose", "x"])
    assert result.exit_code == 0
    assert "captured Identifier('x')" in [r.getMessage() for r in caplog.records]


def test_cli_tokenize_quiet(caplog):
    caplog.set_level(logging.WARNING)
    result = CliRunner().invoke(cli, ["tokenize", "x"])
    assert result.exit_code == 0
    assert not [r for r in caplog.records if r.levelno == logging.DEBUG]

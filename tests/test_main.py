"""Tests for the top-level CLI app."""

from typer.testing import CliRunner

from pomotrack_cli import __version__
from pomotrack_cli.main import app

runner = CliRunner()


def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_help_lists_commands():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    for name in ("run", "config", "version"):
        assert name in result.output

"""Tests for the root staffctl CLI."""

from __future__ import annotations

from click.testing import CliRunner

from staffctl import __version__
from staffctl.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "staffctl" in result.output
    for name in ("list", "add", "search", "search-by-name"):
        assert name in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_no_command_is_invalid(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 1
    assert "Invalid Command......" in result.output


def test_unknown_command_is_invalid(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["delete"])
    assert result.exit_code == 1
    assert "Invalid Command......" in result.output


def test_flags_without_command_are_invalid(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--json", "--no-interact"])
    assert result.exit_code == 1
    assert "Invalid Command......" in result.output


def test_command_help_skips_startup(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["add", "--help"])
    assert result.exit_code == 0
    assert "Add an employee" in result.output


def test_examples_flag(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["search-by-name", "--examples"])
    assert result.exit_code == 0
    assert "staffctl search-by-name --last smith" in result.output

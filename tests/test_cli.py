"""Tests for the root CLI group."""

from __future__ import annotations

from click.testing import CliRunner

from pastelaria import __version__
from pastelaria.cli import cli


class TestRootGroup:
    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_no_subcommand_prints_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "customer" in result.output
        assert "product-type" in result.output
        assert "init" in result.output

    def test_global_flags_in_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--help"])
        for flag in ("--json", "--quiet", "--verbose", "--log-json", "--config", "--root"):
            assert flag in result.output

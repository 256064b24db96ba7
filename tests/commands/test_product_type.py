"""Tests for the product-type command group."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from pastelaria.cli import cli


def _create(cli_runner: CliRunner, name: str) -> int:
    result = cli_runner.invoke(cli, ["--json", "product-type", "create", name])
    assert result.exit_code == 0, result.output
    return json.loads(result.output)["data"]["id"]


@pytest.mark.usefixtures("_isolated_root")
class TestProductTypeCommands:
    def test_create(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "product-type", "create", "Savory"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["op"] == "create_product_type"
        assert data["data"]["name"] == "Savory"

    def test_list_human(self, cli_runner: CliRunner) -> None:
        _create(cli_runner, "Sweet")
        _create(cli_runner, "Savory")
        result = cli_runner.invoke(cli, ["product-type", "list"])
        assert result.exit_code == 0
        assert result.output.index("Savory") < result.output.index("Sweet")
        assert "2 records" in result.output

    def test_list_quiet(self, cli_runner: CliRunner) -> None:
        first = _create(cli_runner, "Savory")
        result = cli_runner.invoke(cli, ["-q", "product-type", "list"])
        assert result.output.strip() == str(first)

    def test_show(self, cli_runner: CliRunner) -> None:
        type_id = _create(cli_runner, "Savory")
        result = cli_runner.invoke(cli, ["product-type", "show", str(type_id)])
        assert result.exit_code == 0
        assert "name: Savory" in result.output

    def test_show_missing(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "product-type", "show", "99"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["error"]["code"] == "NOT_FOUND"
        assert data["error"]["detail"]["status"] == 404

    def test_update(self, cli_runner: CliRunner) -> None:
        type_id = _create(cli_runner, "Savory")
        result = cli_runner.invoke(
            cli, ["--json", "product-type", "update", str(type_id), "--name", "Salty"]
        )
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["name"] == "Salty"

    def test_update_without_changes(self, cli_runner: CliRunner) -> None:
        type_id = _create(cli_runner, "Savory")
        result = cli_runner.invoke(cli, ["product-type", "update", str(type_id)])
        assert result.exit_code == 1
        assert "No changes specified" in result.output

    def test_delete_trashed_restore(self, cli_runner: CliRunner) -> None:
        type_id = _create(cli_runner, "Savory")

        result = cli_runner.invoke(cli, ["--json", "product-type", "delete", str(type_id)])
        assert result.exit_code == 0
        assert json.loads(result.output)["data"] == {"id": type_id}

        listed = json.loads(cli_runner.invoke(cli, ["--json", "product-type", "list"]).output)
        assert listed["data"]["count"] == 0
        trashed = json.loads(cli_runner.invoke(cli, ["--json", "product-type", "trashed"]).output)
        assert [item["id"] for item in trashed["data"]["items"]] == [type_id]

        result = cli_runner.invoke(cli, ["--json", "product-type", "restore", str(type_id)])
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["state"] == "active"

    def test_restore_active_fails(self, cli_runner: CliRunner) -> None:
        type_id = _create(cli_runner, "Savory")
        result = cli_runner.invoke(cli, ["product-type", "restore", str(type_id)])
        assert result.exit_code == 1
        assert "ERROR" in result.output

    def test_non_integer_id(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["product-type", "show", "abc"])
        assert result.exit_code == 2

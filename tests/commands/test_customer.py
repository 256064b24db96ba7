"""Tests for the customer command group."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from pastelaria.cli import cli


@pytest.mark.usefixtures("_isolated_root")
class TestCustomerCommands:
    def test_create_with_contact_fields(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            [
                "--json",
                "customer",
                "create",
                "--name",
                "Ana Souza",
                "--email",
                "ana@example.com",
                "--date-of-birth",
                "1990-04-12",
                "--zip-code",
                "01001-000",
            ],
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)["data"]
        assert data["name"] == "Ana Souza"
        assert data["date_of_birth"] == "1990-04-12"
        assert data["zip_code"] == "01001-000"
        assert data["phone"] is None

    def test_name_required(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["customer", "create"])
        assert result.exit_code == 2
        assert "--name" in result.output

    def test_invalid_email(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "customer", "create", "--name", "Ana", "--email", "nope"]
        )
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["error"]["code"] == "VALIDATION_FAILED"
        assert data["error"]["detail"]["fields"] == ["email"]

    def test_update_and_lifecycle(self, cli_runner: CliRunner) -> None:
        created = cli_runner.invoke(cli, ["--json", "customer", "create", "--name", "Ana"])
        customer_id = json.loads(created.output)["data"]["id"]

        updated = cli_runner.invoke(
            cli, ["--json", "customer", "update", str(customer_id), "--phone", "555-0100"]
        )
        assert updated.exit_code == 0
        assert json.loads(updated.output)["data"]["phone"] == "555-0100"

        assert cli_runner.invoke(cli, ["customer", "delete", str(customer_id)]).exit_code == 0
        result = cli_runner.invoke(
            cli, ["--json", "customer", "update", str(customer_id), "--name", "Bia"]
        )
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "NOT_FOUND"

        assert cli_runner.invoke(cli, ["customer", "restore", str(customer_id)]).exit_code == 0
        shown = cli_runner.invoke(cli, ["--json", "customer", "show", str(customer_id)])
        assert json.loads(shown.output)["data"]["name"] == "Ana"

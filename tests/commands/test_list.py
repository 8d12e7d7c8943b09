"""Tests for the list command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from staffctl.cli import cli


@pytest.mark.usefixtures("_isolated_store")
class TestListCommand:
    def test_pages_through_records(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["list"], input="\n\n\n")
        assert result.exit_code == 0, result.output
        assert result.output.startswith("Employee list-------------------")
        assert result.output.count("Press enter to continue...") == 3
        assert result.output.rstrip().endswith("Employee list is completed")

    def test_store_order_and_salaries(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--no-interact", "list"])
        assert result.exit_code == 0, result.output
        out = result.output
        assert "Press enter" not in out
        assert out.index("firstName: Ann\n") < out.index("firstName: Bob") < out.index(
            "firstName: Annie"
        )
        assert "Salary USD: $80,000.00" in out
        assert "Local Salary: €72,000.00" in out
        assert "Local Salary: £96,000.00" in out
        assert "salaryUSD" not in out

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "list"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["data"]["count"] == 3
        assert [item["id"] for item in data["data"]["items"]] == [1, 3, 2]

    def test_stale_currency_is_shown_not_fatal(self, cli_runner: CliRunner, data_file) -> None:
        records = json.loads(data_file.read_text(encoding="utf-8"))
        records[0]["localCurrency"] = "XYZ"
        data_file.write_text(json.dumps(records), encoding="utf-8")
        result = cli_runner.invoke(cli, ["--no-interact", "list"])
        assert result.exit_code == 0, result.output
        assert "Local Salary: Invalid currency" in result.output


class TestStartupFailures:
    def test_missing_store(
        self, cli_runner: CliRunner, tmp_path, rate_table, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("STAFFCTL_CONFIG", raising=False)
        monkeypatch.setattr(
            "staffctl.infrastructure.rates.RatesClient.fetch", lambda self: rate_table
        )
        result = cli_runner.invoke(cli, ["list"])
        assert result.exit_code == 1
        assert "Cannot complete startup: Can't read the file" in result.output

    def test_store_not_utf8(
        self, cli_runner: CliRunner, data_file, rate_table, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        data_file.write_bytes(b"\xff\xfe[]")
        monkeypatch.chdir(data_file.parent)
        monkeypatch.delenv("STAFFCTL_CONFIG", raising=False)
        monkeypatch.setattr(
            "staffctl.infrastructure.rates.RatesClient.fetch", lambda self: rate_table
        )
        result = cli_runner.invoke(cli, ["list"])
        assert result.exit_code == 1
        assert "Cannot complete startup" in result.output
        assert "not valid UTF-8" in result.output
        assert "Traceback" not in result.output

    def test_rate_fetch_failure(
        self, cli_runner: CliRunner, data_file, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        from staffctl.errors import RateFetchError

        def _fail(self: object) -> None:
            raise RateFetchError("Failed to fetch API: 401")

        monkeypatch.chdir(data_file.parent)
        monkeypatch.delenv("STAFFCTL_CONFIG", raising=False)
        monkeypatch.setattr("staffctl.infrastructure.rates.RatesClient.fetch", _fail)
        result = cli_runner.invoke(cli, ["list"])
        assert result.exit_code == 1
        assert "Cannot complete startup: Failed to fetch API: 401" in result.output

    def test_data_file_option(
        self, cli_runner: CliRunner, data_file, tmp_path, rate_table, monkeypatch
    ) -> None:
        elsewhere = tmp_path / "elsewhere"
        elsewhere.mkdir()
        monkeypatch.chdir(elsewhere)
        monkeypatch.delenv("STAFFCTL_CONFIG", raising=False)
        monkeypatch.setattr(
            "staffctl.infrastructure.rates.RatesClient.fetch", lambda self: rate_table
        )
        result = cli_runner.invoke(cli, ["-d", str(data_file), "--json", "list"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["data"]["count"] == 3

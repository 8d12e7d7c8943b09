"""Shared pytest fixtures for staffctl tests."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from staffctl.domain.rates import RateTable
from staffctl.infrastructure.store import RecordStore
from staffctl.services.state import AppState

SAMPLE_RECORDS: list[dict[str, Any]] = [
    {
        "id": 1,
        "firstName": "Ann",
        "lastName": "Smith",
        "startDateYear": 2015,
        "startDateMonth": 3,
        "startDateDay": 12,
        "isActive": True,
        "salaryUSD": 80000,
        "localCurrency": "EUR",
        "startDate": "2015-03-12",
    },
    {
        "id": 3,
        "firstName": "Bob",
        "lastName": "Goldsmith",
        "startDateYear": 2019,
        "startDateMonth": 11,
        "startDateDay": 1,
        "isActive": False,
        "salaryUSD": 50000,
        "localCurrency": "USD",
        "startDate": "2019-11-01",
    },
    {
        "id": 2,
        "firstName": "Annie",
        "lastName": "Lee",
        "startDateYear": 2021,
        "startDateMonth": 7,
        "startDateDay": 30,
        "isActive": True,
        "salaryUSD": 120000,
        "localCurrency": "GBP",
        "startDate": "2021-07-30",
    },
]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def sample_records() -> list[dict[str, Any]]:
    """Fresh copies of SAMPLE_RECORDS."""
    return copy.deepcopy(SAMPLE_RECORDS)


@pytest.fixture
def rate_table() -> RateTable:
    """USD-based table with EUR at 0.9 and GBP at 0.8."""
    return RateTable(base="USD", date="2024-01-02", rates={"EUR": 0.9, "GBP": 0.8})


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    """A data.json holding SAMPLE_RECORDS."""
    path = tmp_path / "data.json"
    path.write_text(json.dumps(SAMPLE_RECORDS, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def state(data_file: Path, rate_table: RateTable) -> AppState:
    """Application state loaded from the sample store."""
    store = RecordStore(data_file)
    return AppState(store=store, rates=rate_table, employees=store.load())


@pytest.fixture
def _isolated_store(
    data_file: Path,
    rate_table: RateTable,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Run the CLI in a temp dir holding data.json, with rates stubbed out.

    Use via ``@pytest.mark.usefixtures("_isolated_store")`` on command test
    classes. Tests that need the file can request ``data_file`` directly.
    """
    monkeypatch.chdir(data_file.parent)
    monkeypatch.delenv("STAFFCTL_CONFIG", raising=False)
    monkeypatch.setattr(
        "staffctl.infrastructure.rates.RatesClient.fetch",
        lambda self: rate_table,
    )
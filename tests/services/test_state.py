"""Tests for concurrent startup."""

from __future__ import annotations

from pathlib import Path

import pytest

from staffctl.config.settings import StaffSettings
from staffctl.domain.rates import RateTable
from staffctl.errors import RateFetchError, StoreError
from staffctl.services.state import load_state


@pytest.fixture
def settings(data_file: Path, monkeypatch: pytest.MonkeyPatch) -> StaffSettings:
    monkeypatch.delenv("STAFFCTL_CONFIG", raising=False)
    return StaffSettings.from_cli(root=data_file.parent)


class TestLoadState:
    def test_loads_records_and_rates(
        self,
        settings: StaffSettings,
        rate_table: RateTable,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr(
            "staffctl.infrastructure.rates.RatesClient.fetch", lambda self: rate_table
        )
        state = load_state(settings)
        assert [e.id for e in state.employees] == [1, 3, 2]
        assert state.rates is rate_table
        assert state.locale == "en_US"
        assert state.store.path == settings.data_file

    def test_rate_failure_is_fatal(
        self, settings: StaffSettings, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def _fail(self: object) -> RateTable:
            raise RateFetchError("Failed to fetch API: 500")

        monkeypatch.setattr("staffctl.infrastructure.rates.RatesClient.fetch", _fail)
        with pytest.raises(RateFetchError):
            load_state(settings)

    def test_store_failure_is_fatal(
        self,
        tmp_path: Path,
        rate_table: RateTable,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.delenv("STAFFCTL_CONFIG", raising=False)
        monkeypatch.setattr(
            "staffctl.infrastructure.rates.RatesClient.fetch", lambda self: rate_table
        )
        empty_dir = tmp_path / "empty"
        empty_dir.mkdir()
        with pytest.raises(StoreError):
            load_state(StaffSettings.from_cli(root=empty_dir))

"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, staffctl.toml only contains
overrides. A fresh install needs nothing but ``STAFFCTL_RATES__API_KEY``.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, SecretStr

DEFAULT_RATES_ENDPOINT = "https://api.apilayer.com/exchangerates_data/latest"


class StoreConfig(BaseModel):
    """[store] section."""

    model_config = {"frozen": True}

    path: Path = Path("data.json")


class RatesConfig(BaseModel):
    """[rates] section."""

    model_config = {"frozen": True}

    endpoint: str = DEFAULT_RATES_ENDPOINT
    api_key: SecretStr = SecretStr("")
    timeout: float | None = None


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    locale: str = "en_US"


"""Currency rate table.

A rate is the number of units of a currency equal to one unit of the
base currency (USD by default), as published by the rates API.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, model_validator


class RateTable(BaseModel):
    """Immutable snapshot of conversion multipliers, fetched once per run."""

    model_config = {"frozen": True}

    base: str = "USD"
    date: str | None = None
    rates: dict[str, Decimal] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _include_base(cls, data: Any) -> Any:
        # The base currency always converts to itself.
        if isinstance(data, dict):
            base = data.get("base") or "USD"
            rates = data.get("rates") or {}
            if isinstance(rates, Mapping):
                data = {**data, "base": base, "rates": {base: 1, **rates}}
        return data

    def __contains__(self, code: object) -> bool:
        return code in self.rates

    def convert(self, amount: int | Decimal, code: str) -> Decimal:
        """Convert *amount* in the base currency into *code*.

        Raises:
            KeyError: If *code* is not in the table.
        """
        if code == self.base:
            return Decimal(amount)
        return Decimal(amount) * self.rates[code]

"""AppState: explicit per-invocation state and concurrent startup.

Startup runs the record-store read and the rates fetch side by side on a
small ThreadPoolExecutor and waits for both before any command executes.
Either failure aborts the invocation.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from staffctl.infrastructure.rates import RatesClient
from staffctl.infrastructure.store import RecordStore

if TYPE_CHECKING:
    from staffctl.config.settings import StaffSettings
    from staffctl.domain.employee import Employee
    from staffctl.domain.rates import RateTable

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    """Records, rate snapshot, and the store they persist to.

    ``employees`` is mutated only by :meth:`DirectoryService.add_employee`.
    """

    store: RecordStore
    rates: RateTable
    employees: list[Employee] = field(default_factory=list)
    locale: str = "en_US"


def load_state(settings: StaffSettings) -> AppState:
    """Load records and fetch rates concurrently.

    Raises:
        StoreError: If the record store cannot be read.
        RateFetchError: If the rate table cannot be fetched.
    """
    store = RecordStore(settings.data_file)
    client = RatesClient(settings.rates)

    with ThreadPoolExecutor(max_workers=2) as executor:
        employees_future = executor.submit(store.load)
        rates_future = executor.submit(client.fetch)
        employees = employees_future.result()
        rates = rates_future.result()

    logger.debug("Startup complete: %d employees, %d rates", len(employees), len(rates.rates))
    return AppState(
        store=store,
        rates=rates,
        employees=employees,
        locale=settings.display.locale,
    )

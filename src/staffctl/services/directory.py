"""DirectoryService: list, add, and search over the employee directory.

Four surfaces over an explicit :class:`AppState`:
- list_employees: every record in store order
- add_employee: assign the next ID, append, and persist the whole list
- get_employee: exact lookup by ID
- search_by_name: case-insensitive substring filters on first/last name
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from staffctl.domain.employee import Employee, matches_name, next_employee_id
from staffctl.domain.validation import is_currency_code_valid
from staffctl.services.result import ServiceResult

if TYPE_CHECKING:
    from staffctl.services.state import AppState

logger = logging.getLogger(__name__)


class DirectoryService:
    """Handles directory reads and the single write path (add)."""

    def __init__(self, state: AppState) -> None:
        self._state = state

    # ------------------------------------------------------------------
    # list
    # ------------------------------------------------------------------

    def list_employees(self) -> ServiceResult:
        items = [e.to_record() for e in self._state.employees]
        return ServiceResult(
            ok=True,
            op="list_employees",
            data={"count": len(items), "items": items},
        )

    # ------------------------------------------------------------------
    # add
    # ------------------------------------------------------------------

    def next_employee_id(self) -> int:
        return next_employee_id(self._state.employees)

    def add_employee(
        self,
        *,
        first_name: str,
        last_name: str,
        start_date_year: int,
        start_date_month: int,
        start_date_day: int,
        is_active: bool,
        salary_usd: int,
        local_currency: str,
    ) -> ServiceResult:
        """Create a record, append it, and write the full list to the store.

        The currency is checked against the current rate table; later
        changes to the table never invalidate stored records.

        Raises:
            StoreError: If the store cannot be written. The in-memory list
                keeps the new record in that case; the run is aborted anyway.
        """
        op = "add_employee"
        if not is_currency_code_valid(local_currency, self._state.rates):
            return ServiceResult.failure(
                op,
                "INVALID_CURRENCY",
                f"Currency code '{local_currency}' is invalid.",
                currency=local_currency,
            )

        try:
            employee = Employee(
                id=self.next_employee_id(),
                first_name=first_name,
                last_name=last_name,
                start_date_year=start_date_year,
                start_date_month=start_date_month,
                start_date_day=start_date_day,
                is_active=is_active,
                salary_usd=salary_usd,
                local_currency=local_currency,
            )
        except ValidationError as exc:
            return ServiceResult.failure(
                op,
                "INVALID_EMPLOYEE",
                "Employee record failed validation",
                errors=exc.errors(include_url=False, include_context=False),
            )

        self._state.employees.append(employee)
        self._state.store.save(self._state.employees)
        logger.debug("Added employee %d", employee.id)
        return ServiceResult(ok=True, op=op, data={"item": employee.to_record()})

    # ------------------------------------------------------------------
    # search
    # ------------------------------------------------------------------

    def get_employee(self, employee_id: int) -> ServiceResult:
        """Exact ID lookup."""
        for employee in self._state.employees:
            if employee.id == employee_id:
                return ServiceResult(ok=True, op="get_employee", data={"item": employee.to_record()})
        return ServiceResult.failure("get_employee", "NOT_FOUND", "No result found.", id=employee_id)

    def search_by_name(self, first: str = "", last: str = "") -> ServiceResult:
        """Filter by first/last name substrings; empty filters match everything.

        An empty result is still ``ok``; callers report "Not found...".
        """
        items: list[dict[str, Any]] = [
            e.to_record() for e in self._state.employees if matches_name(e, first, last)
        ]
        return ServiceResult(
            ok=True,
            op="search_by_name",
            data={"query": {"first": first, "last": last}, "count": len(items), "items": items},
        )

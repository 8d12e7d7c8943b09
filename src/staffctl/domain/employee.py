"""Employee record model.

Field names are snake_case in Python and camelCase on disk, matching the
JSON store written by earlier versions of the directory. ``startDate`` is
derived from the three date components and recomputed on every load.

INVARIANT: Employee IDs are positive and never reused.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field

# Input ranges enforced at entry time.
START_YEAR_RANGE = (1990, 2023)
START_MONTH_RANGE = (1, 12)
START_DAY_RANGE = (1, 30)
SALARY_USD_RANGE = (10_000, 1_000_000)


def derive_start_date(year: int, month: int, day: int) -> date:
    """Build a calendar date, rolling impossible days into the next month.

    Examples:
        >>> derive_start_date(2020, 5, 4)
        datetime.date(2020, 5, 4)
        >>> derive_start_date(2023, 2, 30)
        datetime.date(2023, 3, 2)
    """
    return date(year, month, 1) + timedelta(days=day - 1)


class Employee(BaseModel):
    """A single directory record."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int = Field(gt=0)
    first_name: str = Field(alias="firstName", min_length=1)
    last_name: str = Field(alias="lastName", min_length=1)
    start_date_year: int = Field(alias="startDateYear")
    start_date_month: int = Field(alias="startDateMonth", ge=1, le=12)
    start_date_day: int = Field(alias="startDateDay", ge=1, le=31)
    is_active: bool = Field(alias="isActive")
    salary_usd: int = Field(alias="salaryUSD")
    local_currency: str = Field(alias="localCurrency")

    @computed_field(alias="startDate")  # type: ignore[prop-decorator]
    @property
    def start_date(self) -> date:
        return derive_start_date(self.start_date_year, self.start_date_month, self.start_date_day)

    def to_record(self) -> dict[str, Any]:
        """Serialize to the camelCase JSON shape used by the record store."""
        return self.model_dump(mode="json", by_alias=True)


def next_employee_id(employees: list[Employee]) -> int:
    """Return the next ID: one past the highest existing ID, or 1."""
    return max((e.id for e in employees), default=0) + 1


def matches_name(employee: Employee, first: str, last: str) -> bool:
    """Case-insensitive substring match; an empty filter matches anything."""
    first = first.lower()
    last = last.lower()
    if first and first not in employee.first_name.lower():
        return False
    if last and last not in employee.last_name.lower():
        return False
    return True

"""Rich renderers for employee records.

Records arrive as the camelCase dicts produced by
:meth:`Employee.to_record`. Salary fields are never printed raw: they are
replaced by a USD line and a local-currency line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from staffctl.domain.money import INVALID_CURRENCY, format_salary
from staffctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from staffctl.domain.rates import RateTable

_HIDDEN_FIELDS = frozenset({"salaryUSD", "localCurrency"})


def _display_value(value: Any) -> str:
    if isinstance(value, bool):
        return "Yes" if value else "No"
    return str(value)


def _money_line(console: Console, label: str, amount: str) -> None:
    style = "staff.invalid" if amount == INVALID_CURRENCY else "staff.money"
    console.print(Text(f"{label}: ", style="staff.key"), Text(amount, style=style), sep="")


def render_employee_to(
    console: Console,
    record: dict[str, Any],
    rates: RateTable,
    *,
    locale: str,
) -> None:
    """Write one record as ``key: value`` lines followed by both salaries."""
    for key, value in record.items():
        if key in _HIDDEN_FIELDS:
            continue
        style = "staff.id" if key == "id" else ""
        console.print(
            Text(f"{key}: ", style="staff.key"),
            Text(_display_value(value), style=style),
            sep="",
        )

    salary = record["salaryUSD"]
    _money_line(console, "Salary USD", format_salary(salary, "USD", rates, locale=locale))
    _money_line(
        console,
        "Local Salary",
        format_salary(salary, record["localCurrency"], rates, locale=locale),
    )


def render_employee(record: dict[str, Any], rates: RateTable, *, locale: str) -> str:
    """Render one record to a string."""
    console = create_console()
    render_employee_to(console, record, rates, locale=locale)
    return get_output(console).rstrip("\n")


def render_search_results(items: list[dict[str, Any]], rates: RateTable, *, locale: str) -> str:
    """Render numbered name-search matches, or ``Not found...``."""
    if not items:
        return "Not found..."

    console = create_console()
    for index, record in enumerate(items, start=1):
        console.print()
        console.print(Text(f"Search result: {index}", style="staff.header"))
        render_employee_to(console, record, rates, locale=locale)
    return get_output(console).rstrip("\n")

"""Command: add an employee interactively."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from staffctl.commands._base import StaffCommand
from staffctl.commands._prompt import QUIT, PromptCancelled, prompt_until_valid
from staffctl.domain.employee import (
    SALARY_USD_RANGE,
    START_DAY_RANGE,
    START_MONTH_RANGE,
    START_YEAR_RANGE,
)
from staffctl.domain.validation import (
    currency_code_validator,
    is_boolean_input_valid,
    is_integer_valid,
    is_string_input_valid,
    transform_boolean_value,
)
from staffctl.output.renderers import render_employee
from staffctl.services.directory import DirectoryService

if TYPE_CHECKING:
    from staffctl.commands._context import AppContext
    from staffctl.services.result import ServiceResult


def _to_int(value: str) -> int:
    return int(value.strip())


@click.command(
    cls=StaffCommand,
    examples=f"""\
  staffctl add
  staffctl --data-file staff.json add
  (type '{QUIT}' at any prompt to cancel)""",
)
@click.pass_obj
def add(app: AppContext) -> None:
    """Add an employee, prompting for each field."""
    state = app.state
    svc = DirectoryService(state)

    click.echo("Add Employee--------------------------")
    click.echo("")
    try:
        fields = {
            "first_name": prompt_until_valid("First Name", is_string_input_valid, str.strip),
            "last_name": prompt_until_valid("Last Name", is_string_input_valid, str.strip),
            "start_date_year": prompt_until_valid(
                "Employee start year", is_integer_valid(*START_YEAR_RANGE), _to_int
            ),
            "start_date_month": prompt_until_valid(
                "Employee start month", is_integer_valid(*START_MONTH_RANGE), _to_int
            ),
            "start_date_day": prompt_until_valid(
                "Employee start date", is_integer_valid(*START_DAY_RANGE), _to_int
            ),
            "is_active": prompt_until_valid(
                "Is employee active? (Yes/No)", is_boolean_input_valid, transform_boolean_value
            ),
            "salary_usd": prompt_until_valid(
                "Annual Salary In USD", is_integer_valid(*SALARY_USD_RANGE), _to_int
            ),
            "local_currency": prompt_until_valid(
                "Local Currency Code (3 letters)", currency_code_validator(state.rates)
            ),
        }
    except PromptCancelled:
        click.echo("Add cancelled, nothing was written.")
        return

    result = svc.add_employee(**fields)

    def _render(r: ServiceResult) -> str:
        body = render_employee(r.data["item"], state.rates, locale=app.locale)
        return f"Employee added.\n{body}"

    app.emit(result, render=_render)

"""Commands: search by employee ID and by name."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from staffctl.commands._base import StaffCommand
from staffctl.commands._prompt import INVALID_INPUT_MESSAGE, QUIT, ask
from staffctl.domain.validation import parse_integer
from staffctl.output.renderers import render_employee, render_search_results
from staffctl.services.directory import DirectoryService

if TYPE_CHECKING:
    from staffctl.commands._context import AppContext
    from staffctl.services.result import ServiceResult


@click.command(
    cls=StaffCommand,
    examples=f"""\
  staffctl search          (prompts until a blank line or '{QUIT}')
  staffctl search 42
  staffctl --json search 42""",
)
@click.argument("employee_id", type=int, required=False)
@click.pass_obj
def search(app: AppContext, employee_id: int | None) -> None:
    """Look up employees by ID.

    With EMPLOYEE_ID, performs one lookup and exits non-zero when it is
    missing. Without it, keeps prompting until a blank line or 'quit'.
    """
    state = app.state
    svc = DirectoryService(state)

    def _render(result: ServiceResult) -> str:
        return "\n" + render_employee(result.data["item"], state.rates, locale=app.locale)

    if employee_id is not None:
        app.emit(svc.get_employee(employee_id), render=_render)
        return

    while True:
        raw = ask("Employee ID").strip()
        if raw in ("", QUIT):
            break
        number = parse_integer(raw)
        if number is None:
            click.echo(INVALID_INPUT_MESSAGE, err=True)
            continue
        app.show(svc.get_employee(number), render=_render)


@click.command(
    "search-by-name",
    cls=StaffCommand,
    examples="""\
  staffctl search-by-name
  staffctl search-by-name --last smith
  staffctl search-by-name --first ann --last lee""",
)
@click.option("--first", default=None, help="First-name substring (case-insensitive).")
@click.option("--last", default=None, help="Last-name substring (case-insensitive).")
@click.pass_obj
def search_by_name(app: AppContext, first: str | None, last: str | None) -> None:
    """Find employees whose names contain the given text.

    Without options, prompts for both filters; leave one blank to match
    any name on that side.
    """
    state = app.state
    if first is None and last is None and not app.settings.no_interact:
        first = ask("First Name")
        last = ask("Last Name")

    result = DirectoryService(state).search_by_name(first or "", last or "")
    app.emit(
        result,
        render=lambda r: render_search_results(r.data["items"], state.rates, locale=app.locale),
    )

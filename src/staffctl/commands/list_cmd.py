"""Command: list every employee, one record per page."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from staffctl.commands._base import StaffCommand
from staffctl.commands._prompt import ask
from staffctl.output.renderers import render_employee
from staffctl.services.directory import DirectoryService

if TYPE_CHECKING:
    from staffctl.commands._context import AppContext


@click.command(
    "list",
    cls=StaffCommand,
    examples="""\
  staffctl list
  staffctl --no-interact list
  staffctl --json list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List all employees with salaries in USD and local currency."""
    state = app.state
    result = DirectoryService(state).list_employees()
    if app.settings.json_output:
        app.emit(result)
        return

    click.echo("Employee list-------------------")
    click.echo("")
    for record in result.data["items"]:
        click.echo(render_employee(record, state.rates, locale=app.locale))
        if not app.settings.no_interact:
            ask("Press enter to continue...", suffix="")
    click.echo("Employee list is completed")

"""Root CLI group for staffctl with global flags and command registration."""

from __future__ import annotations

import click

from staffctl import __version__
from staffctl.commands import register_commands
from staffctl.commands._base import StaffGroup, invalid_command
from staffctl.commands._context import AppContext
from staffctl.config.logging import bind_invocation
from staffctl.config.settings import StaffSettings


@click.group(cls=StaffGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="staffctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-interact", is_flag=True, help="Non-interactive mode (no prompts).")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("-d", "--data-file", default=None, help="Employee JSON file (default: data.json).")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    no_interact: bool,
    config_path: str | None,
    data_file: str | None,
) -> None:
    """staffctl: employee directory CLI."""
    if ctx.invoked_subcommand is None:
        invalid_command(ctx)

    settings = StaffSettings.from_cli(
        config_path=config_path,
        data_file=data_file,
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
        no_interact=no_interact,
    )
    ctx.obj = AppContext(settings)
    bind_invocation(ctx.invoked_subcommand, settings.data_file)


register_commands(cli)

"""Custom Click base classes.

StaffCommand accepts an ``examples`` parameter: when ``--examples`` is
passed, the command prints usage examples and exits. StaffGroup reports
unknown or missing commands with the directory's own message and exit
status 1 instead of Click's usage error.
"""

from __future__ import annotations

from typing import Any

import click

INVALID_COMMAND_MESSAGE = "Invalid Command......"


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class StaffCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


def invalid_command(ctx: click.Context) -> None:
    """Print the invalid-command message and exit 1."""
    click.echo(INVALID_COMMAND_MESSAGE)
    ctx.exit(1)


class StaffGroup(click.Group):
    """Root group: exactly one known command per invocation.

    Sets ``command_class = StaffCommand`` so all subcommands accept the
    ``examples`` parameter without explicit ``cls=`` each time.
    """

    command_class = StaffCommand

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        if not args or self.get_command(ctx, args[0]) is None:
            invalid_command(ctx)
        return super().resolve_command(ctx, args)

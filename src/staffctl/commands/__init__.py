"""Subcommand modules for staffctl.

Provides register_commands() which uses deferred imports to keep
``staffctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the four directory commands on the root CLI group."""
    from staffctl.commands.add import add
    from staffctl.commands.list_cmd import list_cmd
    from staffctl.commands.search import search, search_by_name

    cli.add_command(list_cmd)
    cli.add_command(add)
    cli.add_command(search)
    cli.add_command(search_by_name)

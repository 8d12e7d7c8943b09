"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Owns lazy startup (records + rates) and centralized result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import click

from staffctl.errors import StaffctlError
from staffctl.output.formatters import format_error, format_json

if TYPE_CHECKING:
    from staffctl.config.settings import StaffSettings
    from staffctl.services.result import ServiceResult
    from staffctl.services.state import AppState

Renderer = Callable[["ServiceResult"], str]


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``. Startup runs on first
    access to :attr:`state`, which every command does before any output, so
    ``--help``, ``--examples`` and invalid commands never touch the network
    or the store.
    """

    def __init__(self, settings: StaffSettings) -> None:
        self.settings = settings
        self._state: AppState | None = None

        from staffctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def startup(self) -> None:
        """Load records and fetch rates concurrently; abort on failure."""
        from staffctl.services.state import load_state

        try:
            self._state = load_state(self.settings)
        except StaffctlError as exc:
            click.echo(f"Cannot complete startup: {exc.message}", err=True)
            raise SystemExit(1) from exc

    @property
    def state(self) -> AppState:
        """Records and rates, loaded on first access."""
        if self._state is None:
            self.startup()
        assert self._state is not None
        return self._state

    @property
    def locale(self) -> str:
        return self.settings.display.locale

    def show(self, result: ServiceResult, render: Renderer | None = None) -> None:
        """Output a result without exiting, whatever its outcome."""
        if self.settings.json_output:
            click.echo(format_json(result))
        elif result.ok:
            if render is not None:
                click.echo(render(result))
        else:
            click.echo(format_error(result), err=True)

    def emit(self, result: ServiceResult, render: Renderer | None = None) -> None:
        """Output a result with exit semantics.

        * Success: writes to stdout, returns normally.
        * Failure: writes to stderr (stdout for ``--json``), exits with code 1.
        """
        self.show(result, render)
        if not result.ok:
            raise SystemExit(1)

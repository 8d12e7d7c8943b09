"""Fatal error types.

Every error here is fatal to the invocation: click reports the message
on stderr and exits with status 1. Recoverable conditions (bad input,
unknown currency on display) never raise.
"""

from __future__ import annotations

import click


class StaffctlError(click.ClickException):
    """Base class for errors that abort a staffctl invocation."""

    exit_code = 1


class StoreError(StaffctlError):
    """The record store could not be read or written."""


class RateFetchError(StaffctlError):
    """The currency rate table could not be fetched or parsed."""

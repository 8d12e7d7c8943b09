"""Line-based prompting with validation.

Invalid input is reported on stderr and the same question is asked again
until the answer is valid or the user types :data:`QUIT`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import click

from staffctl.domain.validation import Validator

QUIT = "quit"
INVALID_INPUT_MESSAGE = "Invalid Input..."


class PromptCancelled(Exception):
    """The user typed the quit sentinel."""


def ask(text: str, *, suffix: str = ": ") -> str:
    """Read one raw line; an empty line is allowed."""
    return click.prompt(text, default="", show_default=False, prompt_suffix=suffix)


def prompt_until_valid(
    text: str,
    validator: Validator | None = None,
    transform: Callable[[str], Any] | None = None,
) -> Any:
    """Ask *text* until *validator* accepts the answer.

    Raises:
        PromptCancelled: If the answer is ``quit``.
    """
    while True:
        value = ask(text)
        if value.strip() == QUIT:
            raise PromptCancelled
        if validator is None or validator(value):
            return transform(value) if transform is not None else value
        click.echo(INVALID_INPUT_MESSAGE, err=True)

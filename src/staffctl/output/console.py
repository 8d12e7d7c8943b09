"""Rich Console factory and theme for staffctl output.

Creates Console instances that render to a StringIO buffer so renderers
can return plain strings. In non-TTY environments (tests, pipes) Rich
automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

STAFF_THEME = Theme(
    {
        "staff.header": "bold cyan",
        "staff.key": "dim",
        "staff.id": "bold blue",
        "staff.money": "magenta",
        "staff.invalid": "bold yellow",
    }
)


def create_console() -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=STAFF_THEME,
        highlight=False,
        width=120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()

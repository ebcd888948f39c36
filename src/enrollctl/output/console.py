"""Rich Console factory and theme for enrollctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ENROLL_THEME = Theme(
    {
        "enroll.ok": "bold green",
        "enroll.error": "bold red",
        "enroll.warning": "bold yellow",
        "enroll.op": "bold cyan",
        "enroll.key": "dim",
        "enroll.name": "bold",
        "enroll.course": "green",
        "enroll.role.basic": "blue",
        "enroll.role.customer_admin": "yellow",
        "enroll.role.system_admin": "bold magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=ENROLL_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_role(role: str) -> str:
    """Return the Rich style name for a user role."""
    return f"enroll.role.{role}" if role else ""

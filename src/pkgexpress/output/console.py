"""Rich Console factory and theme for pkgexpress output.

Creates Console instances that render to a StringIO buffer so every line
is echoed through click (and captured by ``CliRunner``).  Color codes are
only emitted when ``force_terminal`` is set; tests and pipes get plain text.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PX_THEME = Theme(
    {
        "px.prompt": "bold cyan",
        "px.error": "bold red",
        "px.warning": "bold yellow",
        "px.total": "bold green",
    }
)


def create_console(
    *,
    no_color: bool = False,
    force_terminal: bool | None = None,
    width: int | None = None,
) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        force_terminal: Emit styles even though the target is a buffer.
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=PX_THEME,
        no_color=no_color,
        force_terminal=force_terminal,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()

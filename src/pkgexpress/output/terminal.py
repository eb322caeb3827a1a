"""Line-oriented terminal capability used by the quote conversation.

The director only sees :class:`Terminal`; the CLI injects a
:class:`ConsoleTerminal` and tests inject an in-memory script.
"""

from __future__ import annotations

import sys
from typing import Protocol, TextIO

import click

from pkgexpress.output.console import create_console, get_output


class Terminal(Protocol):
    """Read one line, write one line."""

    def read_line(self) -> str:
        """Return the next input line without its newline.

        Raises:
            EOFError: When the input stream is exhausted.
        """
        ...

    def write_line(self, text: str, *, style: str | None = None) -> None: ...


class ConsoleTerminal:
    """Terminal backed by stdin and a Rich-styled click echo to stdout."""

    def __init__(self, *, color: bool = False, stdin: TextIO | None = None) -> None:
        self.color = color
        self._stdin = stdin

    def read_line(self) -> str:
        # sys.stdin is looked up on every call.
        stream = self._stdin if self._stdin is not None else sys.stdin
        line = stream.readline()
        if not line:
            raise EOFError("end of input")
        return line.rstrip("\r\n")

    def write_line(self, text: str, *, style: str | None = None) -> None:
        console = create_console(no_color=not self.color, force_terminal=self.color)
        console.print(
            text, style=style, markup=False, emoji=False, highlight=False, soft_wrap=True
        )
        click.echo(get_output(console), nl=False, color=self.color)

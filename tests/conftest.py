"""Shared pytest fixtures and test helpers for pkgexpress tests."""

from __future__ import annotations

import logging
from collections.abc import Generator, Iterable

import pytest
from click.testing import CliRunner

from pkgexpress.services.quote import QuoteEngine


class ScriptedTerminal:
    """In-memory Terminal: replays scripted input, records every written line."""

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._pending = list(lines)
        self.written: list[str] = []
        self.styles: list[str | None] = []
        self.reads = 0

    def read_line(self) -> str:
        if not self._pending:
            raise EOFError("script exhausted")
        self.reads += 1
        return self._pending.pop(0)

    def write_line(self, text: str, *, style: str | None = None) -> None:
        self.written.append(text)
        self.styles.append(style)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore logger state; CLI invocations reconfigure the root handler."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    px = logging.getLogger("pkgexpress")
    px_level = px.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    px.setLevel(px_level)


@pytest.fixture
def engine() -> QuoteEngine:
    """Fresh engine with the default 50/50 limits."""
    return QuoteEngine()


def scripted(*lines: str) -> ScriptedTerminal:
    return ScriptedTerminal(lines)


def stdin(*lines: str) -> str:
    """Join lines into CliRunner input text."""
    return "".join(f"{line}\n" for line in lines)

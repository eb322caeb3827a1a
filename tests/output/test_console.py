"""Tests for the Rich console factory and ConsoleTerminal."""

from io import StringIO

import pytest

from pkgexpress.output.console import PX_THEME, create_console, get_output
from pkgexpress.output.terminal import ConsoleTerminal


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        console = create_console()
        assert isinstance(console.file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("hello", style="px.error")
        output = get_output(console)
        assert "\x1b" not in output
        assert output == "hello\n"

    def test_force_terminal_styles(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("TERM", "xterm-256color")
        console = create_console(force_terminal=True)
        console.print("hello", style="px.total")
        assert "\x1b" in get_output(console)

    def test_default_width(self) -> None:
        assert create_console().width == 120

    def test_theme_styles(self) -> None:
        for name in ("px.prompt", "px.error", "px.warning", "px.total"):
            assert name in PX_THEME.styles


class TestConsoleTerminal:
    def test_read_line_strips_newline(self) -> None:
        terminal = ConsoleTerminal(stdin=StringIO("10\r\n2\n"))
        assert terminal.read_line() == "10"
        assert terminal.read_line() == "2"

    def test_read_line_eof(self) -> None:
        terminal = ConsoleTerminal(stdin=StringIO(""))
        with pytest.raises(EOFError):
            terminal.read_line()

    def test_blank_line_is_not_eof(self) -> None:
        terminal = ConsoleTerminal(stdin=StringIO("\n"))
        assert terminal.read_line() == ""

    def test_write_line_plain(self, capsys: pytest.CaptureFixture[str]) -> None:
        terminal = ConsoleTerminal()
        terminal.write_line("Your estimated total for shipping this package is: $2.40")
        terminal.write_line("[bold]not markup[/bold]", style="px.error")
        out = capsys.readouterr().out
        assert out == (
            "Your estimated total for shipping this package is: $2.40\n"
            "[bold]not markup[/bold]\n"
        )

    def test_long_line_not_wrapped(self, capsys: pytest.CaptureFixture[str]) -> None:
        text = "x" * 300
        ConsoleTerminal().write_line(text)
        assert capsys.readouterr().out == text + "\n"

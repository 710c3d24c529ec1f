"""Tests for ProcessTerminal pieces that do not need a real tty."""

from __future__ import annotations

import io

import pytest

import inline_list.terminal as terminal_module
from inline_list.terminal import CLEAR_SCREEN, HIDE_CURSOR, SHOW_CURSOR, ProcessTerminal


class _BrokenStream(io.StringIO):
    def write(self, data: str) -> int:
        raise OSError("tty gone")


class TestProcessTerminal:
    def test_size_falls_back_without_tty(self) -> None:
        terminal = ProcessTerminal(stdin=io.StringIO(), stdout=io.StringIO())
        assert terminal.columns == 80
        assert terminal.rows == 24

    def test_writes_go_to_stdout(self) -> None:
        out = io.StringIO()
        terminal = ProcessTerminal(stdin=io.StringIO(), stdout=out)
        terminal.hide_cursor()
        terminal.write("abc")
        terminal.show_cursor()
        terminal.clear_screen()
        assert out.getvalue() == HIDE_CURSOR + "abc" + SHOW_CURSOR + CLEAR_SCREEN

    def test_write_errors_are_ignored(self) -> None:
        terminal = ProcessTerminal(stdin=io.StringIO(), stdout=_BrokenStream())
        terminal.write("abc")

    def test_not_running_until_started(self) -> None:
        assert not ProcessTerminal(stdin=io.StringIO(), stdout=io.StringIO()).running


class _FakeTty(io.StringIO):
    def fileno(self) -> int:
        return 0


class TestStartFailure:
    """A failed start leaves the tty as it found it."""

    def test_raw_mode_undone_when_registration_fails(self, monkeypatch: pytest.MonkeyPatch) -> None:
        restored: list[object] = []
        monkeypatch.setattr(terminal_module.termios, "tcgetattr", lambda fd: ["saved"])
        monkeypatch.setattr(terminal_module.tty, "setraw", lambda fd: None)
        monkeypatch.setattr(
            terminal_module.termios,
            "tcsetattr",
            lambda fd, when, attrs: restored.append(attrs),
        )
        terminal = ProcessTerminal(stdin=_FakeTty(), stdout=io.StringIO())

        # No running event loop, so registering the reader fails
        with pytest.raises(RuntimeError):
            terminal.start(lambda data: None, lambda: None)

        assert restored == [["saved"]]
        assert not terminal.running

"""Terminal access for the inline list host.

``Terminal`` is the small surface ``InlineListApp`` draws through.
``ProcessTerminal`` implements it on a real tty: raw mode while running,
key input read by the event loop, SIGWINCH delivered as a resize callback.
"""

from __future__ import annotations

import asyncio
import codecs
import logging
import os
import signal
import sys
import termios
import tty
from typing import Callable, Protocol, TextIO

logger = logging.getLogger(__name__)

InputHandler = Callable[[str], None]
ResizeHandler = Callable[[], None]

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
CLEAR_SCREEN = "\x1b[2J\x1b[H"

_FALLBACK_SIZE = os.terminal_size((80, 24))
_READ_SIZE = 1024


class Terminal(Protocol):
    """What the host needs from a terminal."""

    def start(self, on_input: InputHandler, on_resize: ResizeHandler) -> None: ...

    def stop(self) -> None: ...

    def write(self, data: str) -> None: ...

    @property
    def columns(self) -> int: ...

    @property
    def rows(self) -> int: ...

    def hide_cursor(self) -> None: ...

    def show_cursor(self) -> None: ...

    def clear_screen(self) -> None: ...


class ProcessTerminal:
    """A tty-backed ``Terminal``.

    ``start`` registers with the running event loop, so it has to be called
    from a coroutine. ``stop`` undoes everything ``start`` did and is safe
    to call twice.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._saved_attrs: list | None = None
        self._loop: asyncio.AbstractEventLoop | None = None
        self._on_input: InputHandler | None = None
        self._on_resize: ResizeHandler | None = None
        self._utf8 = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def _size(self) -> os.terminal_size:
        try:
            return os.get_terminal_size(self._out.fileno())
        except (OSError, ValueError):
            return _FALLBACK_SIZE

    @property
    def columns(self) -> int:
        return self._size().columns

    @property
    def rows(self) -> int:
        return self._size().lines

    @property
    def running(self) -> bool:
        return self._loop is not None

    def start(self, on_input: InputHandler, on_resize: ResizeHandler) -> None:
        """Switch the tty to raw mode and start delivering keys and resizes."""
        if self.running:
            raise RuntimeError("terminal already started")

        fd = self._in.fileno()
        self._saved_attrs = termios.tcgetattr(fd)
        tty.setraw(fd)

        self._on_input = on_input
        self._on_resize = on_resize
        try:
            self._loop = asyncio.get_running_loop()
            self._loop.add_reader(fd, self._read_input)
            self._loop.add_signal_handler(signal.SIGWINCH, self._resized)
        except Exception:
            self.stop()
            raise

        size = self._size()
        logger.debug("Raw mode on, %dx%d", size.columns, size.lines)

    def stop(self) -> None:
        """Stop reading and put the tty back the way ``start`` found it."""
        fd = self._in.fileno()
        if self._loop is not None:
            self._loop.remove_reader(fd)
            self._loop.remove_signal_handler(signal.SIGWINCH)
            self._loop = None
        if self._saved_attrs is not None:
            termios.tcsetattr(fd, termios.TCSADRAIN, self._saved_attrs)
            self._saved_attrs = None
            logger.debug("Raw mode off")
        self._on_input = None
        self._on_resize = None

    def write(self, data: str) -> None:
        # A closed or revoked tty must not take the host down mid-frame.
        try:
            self._out.write(data)
            self._out.flush()
        except OSError as exc:
            logger.debug("Terminal write failed: %s", exc)

    def hide_cursor(self) -> None:
        self.write(HIDE_CURSOR)

    def show_cursor(self) -> None:
        self.write(SHOW_CURSOR)

    def clear_screen(self) -> None:
        self.write(CLEAR_SCREEN)

    def _read_input(self) -> None:
        try:
            chunk = os.read(self._in.fileno(), _READ_SIZE)
        except OSError as exc:
            logger.debug("stdin read failed: %s", exc)
            return
        # A multi-byte character split across reads is held by the decoder.
        text = self._utf8.decode(chunk)
        if text and self._on_input is not None:
            self._on_input(text)

    def _resized(self) -> None:
        if self._on_resize is not None:
            self._on_resize()

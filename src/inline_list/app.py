"""Host loop running a single ``InlineList`` on a terminal.

The app owns the lifecycle the widget expects: ``initialize()`` once, then
``handle_input()`` and ``view()`` from the same event loop. Output is
redrawn in place by moving back up over the rows drawn last time.
"""

from __future__ import annotations

import asyncio
import logging
import math
from typing import Any

from inline_list.inline_list import InlineList
from inline_list.keys import Key, matches_key, split_input
from inline_list.styles import Style
from inline_list.terminal import Terminal
from inline_list.utils import display_width

logger = logging.getLogger(__name__)

QUIT_KEY = Key.ctrl("c")

_HELP_STYLE = Style(dim=True)


class InlineListApp:
    """Drives one inline list: input, rendering, shutdown."""

    def __init__(
        self,
        widget: InlineList[Any],
        terminal: Terminal,
        *,
        show_help: bool = True,
    ) -> None:
        self.widget = widget
        self.terminal = terminal
        self.show_help = show_help

        self._rows_drawn = 0
        self._render_requested = False
        self._stopped = True
        self._done: asyncio.Event | None = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def run(self) -> None:
        """Run until ``stop()`` is called (``ctrl+c`` by default)."""
        self._done = asyncio.Event()
        self._stopped = False
        try:
            self.terminal.start(self.handle_input, self._on_resize)
            self.terminal.hide_cursor()
            task = self.widget.initialize()
            self.do_render()
            if task is not None:
                task.add_done_callback(lambda _: self.request_render())
            await self._done.wait()
        finally:
            self._stopped = True
            self.terminal.show_cursor()
            self.terminal.write("\r\n")
            self.terminal.stop()

    def stop(self) -> None:
        self._stopped = True
        if self._done is not None:
            self._done.set()

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def handle_input(self, data: str) -> None:
        for key in split_input(data):
            if matches_key(key, QUIT_KEY):
                logger.debug("Quit requested")
                self.stop()
                return
            self.widget.handle_input(key)
        self.request_render()

    def _on_resize(self) -> None:
        # Row counts from the old width are meaningless now.
        self.terminal.clear_screen()
        self._rows_drawn = 0
        self.request_render()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def request_render(self) -> None:
        """Schedule a render on the next loop tick; repeated calls coalesce."""
        if self._render_requested:
            return
        self._render_requested = True
        try:
            loop = asyncio.get_running_loop()
            loop.call_soon(self._do_render_tick)
        except RuntimeError:
            self._do_render_tick()

    def _do_render_tick(self) -> None:
        self._render_requested = False
        if self._stopped:
            return
        self.do_render()

    def lines(self) -> list[str]:
        lines = [self.widget.view()]
        if self.show_help and self.widget.focusable:
            hint = self.widget.help() if self.widget.is_focused else ""
            toggle = "enter unfocus" if self.widget.is_focused else "enter focus"
            lines.append(_HELP_STYLE(" · ".join(p for p in (hint, toggle, "ctrl+c quit") if p)))
        return lines

    def do_render(self) -> None:
        columns = max(self.terminal.columns, 1)
        lines = self.lines()

        out: list[str] = []
        if self._rows_drawn > 1:
            out.append(f"\x1b[{self._rows_drawn - 1}A")
        out.append("\r\x1b[J")
        out.append("\r\n".join(lines))
        self.terminal.write("".join(out))

        # Lines longer than the terminal wrap onto extra rows.
        self._rows_drawn = sum(
            max(1, math.ceil(display_width(line) / columns)) for line in lines
        )

"""InlineList component: items flowing as one line, joined by a separator.

Each item can carry a prefix and suffix with their own styles, and a cursor
can be moved across the items. Styled strings for every display state of
every item are built ahead of the first render by a background task; until an
item's strings arrive it is rendered on demand.
"""

from __future__ import annotations

import asyncio
import logging
from functools import partial
from typing import Callable, Generic, Iterable, TypeVar

from inline_list.entry import (
    Entry,
    RawParts,
    RenderCache,
    RenderedVariant,
    compose_variant,
)
from inline_list.keybindings import TOGGLE_FOCUS_KEY, ListKeybindings
from inline_list.keys import matches_key
from inline_list.styles import (
    ItemFocus,
    ItemStyle,
    ListFocus,
    StyleStates,
    plain_styles,
)
from inline_list.utils import display_width

logger = logging.getLogger(__name__)

T = TypeVar("T")

RenderFn = Callable[[T], str]

# Marks the end of population on the handoff queue.
_DONE = object()


class InlineList(Generic[T]):
    """A horizontally flowing, separator-joined list with a focus cursor.

    *render_item* must be pure: the same item always renders to the same
    string. Caches are built once at ``initialize()`` and never rebuilt.
    """

    def __init__(
        self,
        items: Iterable[T],
        render_item: RenderFn[T] | None = None,
        render_prefix: RenderFn[T] | None = None,
        render_suffix: RenderFn[T] | None = None,
        *,
        separator: str = ", ",
        styles: StyleStates | None = None,
        keybindings: ListKeybindings | None = None,
        focusable: bool = False,
    ) -> None:
        if render_item is None:
            logger.debug("No item renderer given, using str()")
            render_item = str

        self._render_item: RenderFn[T] = render_item
        self._render_prefix = render_prefix
        self._render_suffix = render_suffix
        self._separator = separator

        self.styles: StyleStates = styles if styles is not None else plain_styles()
        self.keybindings: ListKeybindings = (
            keybindings if keybindings is not None else ListKeybindings()
        )

        self._entries: list[Entry[T]] = [
            Entry(item, partial(self._compose_state, item)) for item in items
        ]

        self._focusable = focusable
        self._has_focus = False
        self._focused_index: int | None = None
        self.keybindings.set_enabled(False)

        self._initialized = False
        self._queue: asyncio.Queue[object] | None = None
        self._populate_task: asyncio.Task[None] | None = None

    @classmethod
    def of(cls, *items: T, **options: object) -> InlineList[T]:
        """Build a list from positional items."""
        return cls(items, **options)  # type: ignore[arg-type]

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def entries(self) -> list[Entry[T]]:
        return list(self._entries)

    @property
    def items(self) -> list[T]:
        return [entry.item for entry in self._entries]

    @property
    def separator(self) -> str:
        return self._separator

    @property
    def render_item(self) -> RenderFn[T]:
        return self._render_item

    @property
    def render_prefix(self) -> RenderFn[T] | None:
        return self._render_prefix

    @property
    def render_suffix(self) -> RenderFn[T] | None:
        return self._render_suffix

    def __len__(self) -> int:
        return len(self._entries)

    # ------------------------------------------------------------------
    # Focus
    # ------------------------------------------------------------------

    @property
    def focusable(self) -> bool:
        return self._focusable

    @focusable.setter
    def focusable(self, value: bool) -> None:
        self._focusable = value

    def set_focusable(self, value: bool) -> None:
        """Enable or disable the item cursor.

        While disabled, navigation input is ignored and the cursor is
        dropped at the next ``view()``.
        """
        self._focusable = value

    def focus(self) -> None:
        """Give the list input focus, enabling its keybindings."""
        self._has_focus = True
        self.keybindings.set_enabled(True)

    def unfocus(self) -> None:
        """Take input focus away from the list, disabling its keybindings."""
        self._has_focus = False
        self.keybindings.set_enabled(False)

    def toggle_focus(self) -> None:
        if self._has_focus:
            self.unfocus()
        else:
            self.focus()

    @property
    def is_focused(self) -> bool:
        return self._has_focus

    # ``focused`` lets a host treat the list as a focusable component.
    @property
    def focused(self) -> bool:
        return self._has_focus

    @focused.setter
    def focused(self, value: bool) -> None:
        if value:
            self.focus()
        else:
            self.unfocus()

    @property
    def list_focus(self) -> ListFocus:
        return ListFocus.FOCUSED if self._has_focus else ListFocus.UNFOCUSED

    @property
    def focused_index(self) -> int | None:
        """Index of the focused entry, or ``None``.

        Re-checked against the current entries on every access.
        """
        if not self._focusable:
            return None
        index = self._focused_index
        if index is None or not 0 <= index < len(self._entries):
            return None
        return index

    def get_focused(self) -> T | None:
        """Return the focused item, or ``None`` if there is none."""
        index = self.focused_index
        if index is None:
            return None
        return self._entries[index].item

    def set_focused_index(self, index: int | None) -> None:
        """Move the cursor to *index* (clamped), or clear it with ``None``."""
        if index is not None and self._entries:
            index = max(0, min(index, len(self._entries) - 1))
        elif index is not None:
            index = None

        previous = self._focused_index
        if previous is not None and 0 <= previous < len(self._entries):
            self._entries[previous].focused = False
        self._focused_index = index
        if index is not None:
            self._entries[index].focused = True

    def focus_next(self) -> None:
        # An unset cursor counts as resting on the first entry.
        current = self.focused_index
        start = 0 if current is None else current
        self.set_focused_index(min(start + 1, len(self._entries) - 1))

    def focus_previous(self) -> None:
        current = self.focused_index
        if current is None:
            self.set_focused_index(len(self._entries) - 1)
        else:
            self.set_focused_index(max(current - 1, 0))

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def handle_input(self, data: str) -> bool:
        """Handle one key press; return ``True`` if it was consumed."""
        if not self._focusable:
            return False

        if matches_key(data, TOGGLE_FOCUS_KEY):
            self.toggle_focus()
            return True

        if not self._entries or not self._has_focus:
            return False

        # The bindings may be shared with other lists.
        self.keybindings.set_enabled(True)
        if self.keybindings.matches(data, "focusNext"):
            self.focus_next()
            return True
        if self.keybindings.matches(data, "focusPrevious"):
            self.focus_previous()
            return True

        logger.debug("Ignoring input %r", data)
        return False

    def help(self) -> str:
        """Help line for the navigation keys; empty while the list lacks focus."""
        self.keybindings.set_enabled(self._has_focus)
        return self.keybindings.help()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _raw_parts(self, item: T) -> RawParts:
        return RawParts(
            main=self._render_item(item),
            prefix=self._render_prefix(item) if self._render_prefix else None,
            suffix=self._render_suffix(item) if self._render_suffix else None,
        )

    def compose_variant(self, item: T, item_style: ItemStyle) -> RenderedVariant:
        """Render *item* with *item_style*: the styled string and its width."""
        return compose_variant(self._raw_parts(item), item_style)

    def _compose_state(
        self, item: T, list_focus: ListFocus, item_focus: ItemFocus
    ) -> RenderedVariant:
        logger.debug("Render cache miss for %r, composing inline", item)
        return self.compose_variant(item, self.styles.item_style(list_focus, item_focus))

    def _build_cache(self, item: T) -> RenderCache:
        # Callbacks run once; styling is applied four times.
        return RenderCache.build(self._raw_parts(item), self.styles)

    def initialize(self) -> asyncio.Task[None] | None:
        """Start building the render caches.

        With a running event loop this schedules one background task and
        returns it. Without one the caches are built before returning.
        Calling it again does nothing.
        """
        if self._initialized:
            return self._populate_task
        self._initialized = True

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None

        if loop is None:
            logger.debug(
                "No running event loop, building %d render caches inline",
                len(self._entries),
            )
            for entry in self._entries:
                entry.publish(self._build_cache(entry.item))
            return None

        # Room for every cache plus the completion marker.
        queue: asyncio.Queue[object] = asyncio.Queue(maxsize=len(self._entries) + 1)
        self._queue = queue
        self._populate_task = loop.create_task(self._populate(queue))
        self._populate_task.add_done_callback(self._on_populate_done)
        return self._populate_task

    async def _populate(self, queue: asyncio.Queue[object]) -> None:
        logger.debug("Building render caches for %d entries", len(self._entries))
        for index, entry in enumerate(self._entries):
            queue.put_nowait((index, self._build_cache(entry.item)))
            await asyncio.sleep(0)
        queue.put_nowait(_DONE)
        logger.debug("Render caches built")

    @staticmethod
    def _on_populate_done(task: asyncio.Task[None]) -> None:
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Building render caches failed", exc_info=exc)

    def _drain(self) -> None:
        """Publish every cache that has arrived, without waiting."""
        queue = self._queue
        if queue is None:
            return
        while True:
            try:
                message = queue.get_nowait()
            except asyncio.QueueEmpty:
                return
            if message is _DONE:
                self._queue = None
                return
            index, cache = message  # type: ignore[misc]
            self._entries[index].publish(cache)

    @property
    def is_populated(self) -> bool:
        """Whether every entry has a published render cache."""
        return all(entry.cache is not None for entry in self._entries)

    async def wait_populated(self) -> None:
        """Wait for the background task and publish its caches."""
        if self._populate_task is not None:
            await self._populate_task
        self._drain()

    def view(self) -> str:
        """Compose the full display string."""
        self._drain()

        if not self._focusable and self._focused_index is not None:
            self.set_focused_index(None)

        list_focus = self.list_focus
        list_style = self.styles.for_list(list_focus)
        separator = list_style.separator(self._separator)

        body = separator.join(entry.render(list_focus) for entry in self._entries)
        return list_style.container(body)

    def view_width(self) -> int:
        """Width in columns of ``view()`` on a single unbroken line."""
        return display_width(self.view())

    def render(self, width: int) -> list[str]:
        return [self.view()]

    def invalidate(self) -> None:
        pass

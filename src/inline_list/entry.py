"""List entries and their render caches.

An ``Entry`` wraps one item of an inline list. Its ``RenderCache`` holds the
fully styled string for every ``(ListFocus, ItemFocus)`` pair and is
published in one step, so readers either see no cache or a complete one.
Until then an entry composes the single variant it is asked for on demand.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from inline_list.styles import ItemFocus, ItemStyle, ListFocus, StyleStates
from inline_list.utils import display_width, no_break

T = TypeVar("T")


@dataclass(frozen=True)
class RawParts:
    """Unstyled output of the render callbacks for one item."""

    main: str
    prefix: str | None = None
    suffix: str | None = None


@dataclass(frozen=True)
class RenderedVariant:
    """A styled string and the width of its unstyled text in columns."""

    text: str
    width: int


def compose_variant(parts: RawParts, style: ItemStyle) -> RenderedVariant:
    """Style and join prefix, main text and suffix.

    Prefix and suffix have their spaces made non-breaking so they stay glued
    to the item when the line flows.
    """
    chunks: list[str] = []
    width = 0

    if parts.prefix is not None:
        s = no_break(parts.prefix)
        width += display_width(s)
        chunks.append(style.prefix(s))

    width += display_width(parts.main)
    chunks.append(style.main(parts.main))

    if parts.suffix is not None:
        s = no_break(parts.suffix)
        width += display_width(s)
        chunks.append(style.suffix(s))

    return RenderedVariant("".join(chunks), width)


@dataclass(frozen=True)
class RenderCache:
    """Every display variant of one item."""

    list_unfocused_item_normal: RenderedVariant
    list_unfocused_item_focused: RenderedVariant
    list_focused_item_normal: RenderedVariant
    list_focused_item_focused: RenderedVariant

    @classmethod
    def build(cls, parts: RawParts, styles: StyleStates) -> RenderCache:
        def variant(list_focus: ListFocus, item_focus: ItemFocus) -> RenderedVariant:
            return compose_variant(parts, styles.item_style(list_focus, item_focus))

        return cls(
            list_unfocused_item_normal=variant(ListFocus.UNFOCUSED, ItemFocus.NORMAL),
            list_unfocused_item_focused=variant(ListFocus.UNFOCUSED, ItemFocus.FOCUSED),
            list_focused_item_normal=variant(ListFocus.FOCUSED, ItemFocus.NORMAL),
            list_focused_item_focused=variant(ListFocus.FOCUSED, ItemFocus.FOCUSED),
        )

    def variant(self, list_focus: ListFocus, item_focus: ItemFocus) -> RenderedVariant:
        return {
            (ListFocus.UNFOCUSED, ItemFocus.NORMAL): self.list_unfocused_item_normal,
            (ListFocus.UNFOCUSED, ItemFocus.FOCUSED): self.list_unfocused_item_focused,
            (ListFocus.FOCUSED, ItemFocus.NORMAL): self.list_focused_item_normal,
            (ListFocus.FOCUSED, ItemFocus.FOCUSED): self.list_focused_item_focused,
        }[(list_focus, item_focus)]


class Entry(Generic[T]):
    """One item of an inline list, with its focus flag and render cache.

    *compose* renders a single variant of this entry on demand; the owning
    list binds it to its render callbacks and style tree.
    """

    def __init__(
        self,
        item: T,
        compose: Callable[[ListFocus, ItemFocus], RenderedVariant],
    ) -> None:
        self.item = item
        self.focused = False
        self._compose = compose
        self._cache: RenderCache | None = None

    def __repr__(self) -> str:
        state = "cached" if self._cache is not None else "pending"
        return f"Entry({self.item!r}, focused={self.focused}, {state})"

    @property
    def cache(self) -> RenderCache | None:
        return self._cache

    @property
    def item_focus(self) -> ItemFocus:
        return ItemFocus.FOCUSED if self.focused else ItemFocus.NORMAL

    def publish(self, cache: RenderCache) -> bool:
        """Store *cache* unless one is already published."""
        if self._cache is not None:
            return False
        self._cache = cache
        return True

    def resolve(self, list_focus: ListFocus) -> RenderedVariant:
        if self._cache is not None:
            return self._cache.variant(list_focus, self.item_focus)
        return self._compose(list_focus, self.item_focus)

    def render(self, list_focus: ListFocus) -> str:
        """Return the styled string for *list_focus* and this entry's focus."""
        return self.resolve(list_focus).text

    def width(self, list_focus: ListFocus) -> int:
        return self.resolve(list_focus).width

"""Style tree for the inline list.

Every display state of an item is the pair ``(ListFocus, ItemFocus)``. The
tree holds one ``ItemStyle`` per pair plus a separator and container styler
per list state. A styler is any ``Callable[[str], str]``; ``Style`` is the
concrete ANSI implementation and ``Style()`` with no attributes is the
identity.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field, replace
from typing import Callable

StyleFn = Callable[[str], str]

# ---------------------------------------------------------------------------
# Display-state axes
# ---------------------------------------------------------------------------


class ListFocus(enum.Enum):
    """Whether the whole list has input focus."""

    UNFOCUSED = "unfocused"
    FOCUSED = "focused"


class ItemFocus(enum.Enum):
    """Whether an entry is the navigation cursor target."""

    NORMAL = "normal"
    FOCUSED = "focused"


# ---------------------------------------------------------------------------
# ANSI Style
# ---------------------------------------------------------------------------

_RESET = "\x1b[0m"
_BOLD = "1"
_DIM = "2"
_ITALIC = "3"
_UNDERLINE = "4"

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def _parse_hex(color: str) -> tuple[int, int, int]:
    match = _HEX_RE.match(color)
    if match is None:
        raise ValueError(f"Invalid hex color: {color!r}")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


@dataclass(frozen=True)
class Style:
    """Text attributes rendered as a single SGR sequence.

    Colors are ``#rrggbb`` / ``#rgb`` hex strings and are emitted as 24-bit
    sequences.
    """

    foreground: str | None = None
    background: str | None = None
    bold: bool = False
    italic: bool = False
    underline: bool = False
    dim: bool = False

    def __post_init__(self) -> None:
        # Malformed colors raise here, not at render time.
        if self.foreground is not None:
            _parse_hex(self.foreground)
        if self.background is not None:
            _parse_hex(self.background)

    def derive(self, **changes: object) -> Style:
        """Return a copy of this style with *changes* applied."""
        return replace(self, **changes)  # type: ignore[arg-type]

    @property
    def is_plain(self) -> bool:
        return not self._codes()

    def _codes(self) -> list[str]:
        codes: list[str] = []
        if self.bold:
            codes.append(_BOLD)
        if self.dim:
            codes.append(_DIM)
        if self.italic:
            codes.append(_ITALIC)
        if self.underline:
            codes.append(_UNDERLINE)
        if self.foreground is not None:
            r, g, b = _parse_hex(self.foreground)
            codes.append(f"38;2;{r};{g};{b}")
        if self.background is not None:
            r, g, b = _parse_hex(self.background)
            codes.append(f"48;2;{r};{g};{b}")
        return codes

    def render(self, text: str) -> str:
        if not text:
            return text
        codes = self._codes()
        if not codes:
            return text
        return f"\x1b[{';'.join(codes)}m{text}{_RESET}"

    def __call__(self, text: str) -> str:
        return self.render(text)


# ---------------------------------------------------------------------------
# Tree
# ---------------------------------------------------------------------------


@dataclass
class ItemStyle:
    """Stylers for the prefix, main text and suffix of one item."""

    prefix: StyleFn = field(default_factory=Style)
    main: StyleFn = field(default_factory=Style)
    suffix: StyleFn = field(default_factory=Style)


@dataclass
class ItemStyleStates:
    normal: ItemStyle = field(default_factory=ItemStyle)
    focused: ItemStyle = field(default_factory=ItemStyle)

    def for_item(self, item_focus: ItemFocus) -> ItemStyle:
        return {
            ItemFocus.NORMAL: self.normal,
            ItemFocus.FOCUSED: self.focused,
        }[item_focus]


@dataclass
class ListStyle:
    """Styling for one list-focus state."""

    container: StyleFn = field(default_factory=Style)
    separator: StyleFn = field(default_factory=Style)
    item: ItemStyleStates = field(default_factory=ItemStyleStates)


@dataclass
class StyleStates:
    """The full style tree, keyed by list focus then item focus."""

    unfocused: ListStyle = field(default_factory=ListStyle)
    focused: ListStyle = field(default_factory=ListStyle)

    def for_list(self, list_focus: ListFocus) -> ListStyle:
        return {
            ListFocus.UNFOCUSED: self.unfocused,
            ListFocus.FOCUSED: self.focused,
        }[list_focus]

    def item_style(self, list_focus: ListFocus, item_focus: ItemFocus) -> ItemStyle:
        return self.for_list(list_focus).item.for_item(item_focus)


def plain_styles() -> StyleStates:
    """Return a style tree that leaves every string untouched."""
    return StyleStates()


def default_styles() -> StyleStates:
    """Return the default (Catppuccin-flavoured) style tree."""
    main = Style(foreground="#bac2de")
    prefix = Style()
    suffix = Style()

    unfocused_normal = ItemStyle(prefix=prefix, main=main, suffix=suffix)
    unfocused_focused = ItemStyle(
        prefix=prefix.derive(foreground="#f9e2af"),
        main=main.derive(foreground="#f5e0dc"),
        suffix=suffix.derive(foreground="#99d1db"),
    )

    focused_prefix = prefix.derive(foreground="#b9957f")
    focused_main = main.derive(foreground="#cdd6f4")
    focused_suffix = suffix.derive(foreground="#99d1db")
    focused_normal = ItemStyle(
        prefix=focused_prefix, main=focused_main, suffix=focused_suffix
    )
    focused_focused = ItemStyle(
        prefix=focused_prefix.derive(foreground="#fab387", bold=True),
        main=focused_main.derive(foreground="#f9e2af", bold=True),
        suffix=focused_suffix.derive(foreground="#89dceb"),
    )

    return StyleStates(
        unfocused=ListStyle(
            item=ItemStyleStates(normal=unfocused_normal, focused=unfocused_focused),
        ),
        focused=ListStyle(
            item=ItemStyleStates(normal=focused_normal, focused=focused_focused),
        ),
    )

"""inline-list: a horizontally flowing list widget for terminal UIs."""

# Entries and render caches
from inline_list.entry import (
    Entry,
    RawParts,
    RenderCache,
    RenderedVariant,
    compose_variant,
)

# Widget
from inline_list.inline_list import InlineList

# Keybindings
from inline_list.keybindings import (
    DEFAULT_LIST_KEYBINDINGS,
    TOGGLE_FOCUS_KEY,
    KeyBinding,
    ListAction,
    ListKeybindings,
)

# Keyboard input handling
from inline_list.keys import Key, KeyId, matches_key, parse_key, split_input

# Styles
from inline_list.styles import (
    ItemFocus,
    ItemStyle,
    ItemStyleStates,
    ListFocus,
    ListStyle,
    Style,
    StyleStates,
    default_styles,
    plain_styles,
)

# Utilities
from inline_list.utils import display_width, grapheme_count, no_break, normalize

__all__ = [
    # Entries
    "Entry",
    "RawParts",
    "RenderCache",
    "RenderedVariant",
    "compose_variant",
    # Widget
    "InlineList",
    # Keybindings
    "DEFAULT_LIST_KEYBINDINGS",
    "TOGGLE_FOCUS_KEY",
    "KeyBinding",
    "ListAction",
    "ListKeybindings",
    # Keys
    "Key",
    "KeyId",
    "matches_key",
    "parse_key",
    "split_input",
    # Styles
    "ItemFocus",
    "ItemStyle",
    "ItemStyleStates",
    "ListFocus",
    "ListStyle",
    "Style",
    "StyleStates",
    "default_styles",
    "plain_styles",
    # Utilities
    "display_width",
    "grapheme_count",
    "no_break",
    "normalize",
]

"""Inline list keybindings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from inline_list.keys import Key, KeyId, matches_key

ListAction = Literal[
    "focusNext",
    "focusPrevious",
]

ListKeybindingsConfig = dict[ListAction, KeyId | list[KeyId]]

DEFAULT_LIST_KEYBINDINGS: dict[ListAction, KeyId | list[KeyId]] = {
    "focusNext": [Key.right, "l"],
    "focusPrevious": [Key.left, "h"],
}

# Not configurable: flips whether the list itself has focus.
TOGGLE_FOCUS_KEY: KeyId = Key.enter

_DEFAULT_HELP: dict[ListAction, tuple[str, str]] = {
    "focusNext": ("→/l", "focus next item"),
    "focusPrevious": ("←/h", "focus previous item"),
}


@dataclass
class KeyBinding:
    """A set of keys bound to one action, with help text."""

    keys: list[KeyId] = field(default_factory=list)
    help_key: str = ""
    help_desc: str = ""
    enabled: bool = True

    def matches(self, data: str) -> bool:
        if not self.enabled:
            return False
        return any(matches_key(data, key) for key in self.keys)

    def help(self) -> str:
        key = self.help_key or "/".join(self.keys)
        return f"{key} {self.help_desc}".strip()


class ListKeybindings:
    """Manages the navigation keybindings of an inline list."""

    def __init__(self, config: ListKeybindingsConfig | None = None) -> None:
        self._bindings: dict[ListAction, KeyBinding] = {}
        self._build_maps(config or {})

    def _build_maps(self, config: ListKeybindingsConfig) -> None:
        enabled = {action: b.enabled for action, b in self._bindings.items()}
        self._bindings.clear()

        merged: dict[ListAction, KeyId | list[KeyId]] = dict(DEFAULT_LIST_KEYBINDINGS)
        merged.update(config)

        for action, keys in merged.items():
            key_array = keys if isinstance(keys, list) else [keys]
            help_key, help_desc = _DEFAULT_HELP[action]
            if action in config:
                # The default glyphs only describe the default keys
                help_key = "/".join(key_array)
            self._bindings[action] = KeyBinding(
                keys=list(key_array),
                help_key=help_key,
                help_desc=help_desc,
                enabled=enabled.get(action, True),
            )

    def matches(self, data: str, action: ListAction) -> bool:
        """Check if input matches a specific action."""
        binding = self._bindings.get(action)
        if binding is None:
            return False
        return binding.matches(data)

    def get_keys(self, action: ListAction) -> list[KeyId]:
        """Get keys bound to an action."""
        binding = self._bindings.get(action)
        return list(binding.keys) if binding else []

    def binding(self, action: ListAction) -> KeyBinding:
        return self._bindings[action]

    def set_enabled(self, enabled: bool) -> None:
        """Enable or disable every navigation binding."""
        for binding in self._bindings.values():
            binding.enabled = enabled

    def set_config(self, config: ListKeybindingsConfig) -> None:
        """Update configuration."""
        self._build_maps(config)

    def help(self) -> str:
        """Help line for the enabled bindings."""
        return " · ".join(
            binding.help()
            for binding in self._bindings.values()
            if binding.enabled
        )

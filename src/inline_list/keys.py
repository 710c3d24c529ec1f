"""Keyboard input parsing and matching for terminal applications.

Turns raw terminal input (legacy xterm/VT sequences, control bytes and plain
characters) into key identifiers such as ``"right"``, ``"ctrl+c"`` or
``"shift+alt+left"``, and matches input against such identifiers.
"""

from __future__ import annotations

import re

KeyId = str


class Key:
    """Ids of the keys an inline list host deals with, plus modifier helpers."""

    enter = "enter"
    escape = "escape"
    tab = "tab"
    left = "left"
    right = "right"
    home = "home"
    end = "end"

    @staticmethod
    def ctrl(key: str) -> str:
        return f"ctrl+{key}"

    @staticmethod
    def shift(key: str) -> str:
        return f"shift+{key}"

    @staticmethod
    def alt(key: str) -> str:
        return f"alt+{key}"


# ---------------------------------------------------------------------------
# Modifier bits and sequence tables
# ---------------------------------------------------------------------------

MODIFIERS: dict[str, int] = {
    "shift": 1,
    "alt": 2,
    "ctrl": 4,
}

KEY_ALIASES: dict[str, str] = {
    "esc": "escape",
    "return": "enter",
    "pgup": "pageUp",
    "pgdown": "pageDown",
    " ": "space",
}

# CSI/SS3 final byte -> key name
_CURSOR_FINALS: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
    "H": "home",
    "F": "end",
}

# CSI <n> ~ -> key name
_TILDE_NUMBERS: dict[int, str] = {
    1: "home",
    2: "insert",
    3: "delete",
    4: "end",
    5: "pageUp",
    6: "pageDown",
}

# ESC [ A / ESC O A, optionally with ``1;<mod>`` parameters
_CURSOR_RE = re.compile(r"^\x1b(?:\[(?:1;(\d+))?|O)([ABCDHF])$")
# ESC [ <n> ~ / ESC [ <n> ; <mod> ~
_TILDE_RE = re.compile(r"^\x1b\[(\d+)(?:;(\d+))?~$")

_SIMPLE_KEYS: dict[str, str] = {
    "\x1b": "escape",
    "\r": "enter",
    "\n": "enter",
    "\t": "tab",
    " ": "space",
    "\x7f": "backspace",
    "\x08": "backspace",
    "\x00": "ctrl+space",
    "\x1b[Z": "shift+tab",
}


def _prefix(mod: int) -> str:
    prefix = ""
    if mod & MODIFIERS["ctrl"]:
        prefix += "ctrl+"
    if mod & MODIFIERS["shift"]:
        prefix += "shift+"
    if mod & MODIFIERS["alt"]:
        prefix += "alt+"
    return prefix


def _xterm_modifier(param: str | None) -> int:
    # xterm encodes modifiers as 1 + bitmask
    if not param:
        return 0
    return max(int(param) - 1, 0) & 0b111


# ---------------------------------------------------------------------------
# Key ids: "ctrl+shift+x" <-> (bits, base key)
# ---------------------------------------------------------------------------


def parse_key_id(key_id: str) -> tuple[int, str] | None:
    """Split ``"ctrl+shift+a"`` into ``(modifier_bits, "a")``.

    An upper-case single character implies shift, so ``"L"`` is
    ``"shift+l"``. Returns ``None`` when there is no base key.
    """
    if not key_id:
        return None

    modifier = 0
    key_parts: list[str] = []
    for part in key_id.split("+"):
        lower = part.lower()
        if lower in MODIFIERS:
            modifier |= MODIFIERS[lower]
        else:
            key_parts.append(part)

    # "ctrl++" splits into two empty parts around the literal plus
    key = "+".join(key_parts)
    if not key:
        return None

    key = KEY_ALIASES.get(key.lower(), key)
    if len(key) == 1 and key.isupper():
        modifier |= MODIFIERS["shift"]
        key = key.lower()
    return modifier, key


def canonical_key_id(key_id: str) -> str | None:
    """Return *key_id* with its modifiers in ``ctrl+shift+alt`` order."""
    parsed = parse_key_id(key_id)
    if parsed is None:
        return None
    modifier, key = parsed
    return _prefix(modifier) + key


# ---------------------------------------------------------------------------
# parse_key: raw input -> key identifier
# ---------------------------------------------------------------------------


def parse_key(data: str) -> str | None:
    """Parse raw terminal input and return its key identifier, or ``None``."""
    if not data:
        return None

    if data in _SIMPLE_KEYS:
        return _SIMPLE_KEYS[data]

    match = _CURSOR_RE.match(data)
    if match:
        return _prefix(_xterm_modifier(match.group(1))) + _CURSOR_FINALS[match.group(2)]

    match = _TILDE_RE.match(data)
    if match:
        name = _TILDE_NUMBERS.get(int(match.group(1)))
        if name is None:
            return None
        return _prefix(_xterm_modifier(match.group(2))) + name

    # Ctrl + letter (0x01 - 0x1a)
    if len(data) == 1 and 1 <= ord(data) <= 26:
        return "ctrl+" + chr(ord(data) + ord("a") - 1)

    # Alt + key arrives ESC-prefixed
    if len(data) == 2 and data[0] == "\x1b":
        inner = parse_key(data[1])
        if inner is None:
            return None
        if inner.startswith("ctrl+"):
            return "ctrl+alt+" + inner[len("ctrl+"):]
        if inner.startswith("shift+"):
            return "shift+alt+" + inner[len("shift+"):]
        return "alt+" + inner

    if len(data) == 1 and data.isprintable():
        if data.isupper():
            return "shift+" + data.lower()
        return data

    return None


def matches_key(data: str, key_id: KeyId) -> bool:
    """Return ``True`` if *data* (raw terminal input) is the key *key_id*."""
    expected = canonical_key_id(key_id)
    if expected is None:
        return False
    actual = parse_key(data)
    if actual is None:
        return False
    return actual == expected


# ---------------------------------------------------------------------------
# split_input: one read from stdin -> individual key presses
# ---------------------------------------------------------------------------

_INPUT_RE = re.compile(
    r"\x1b\[[0-9;]*[A-Za-z~]"  # CSI
    r"|\x1bO[A-Za-z]"          # SS3
    r"|\x1b[\s\S]?"            # alt+key, or a lone escape
    r"|[\s\S]"
)


def split_input(data: str) -> list[str]:
    """Split a chunk of raw input into separate key sequences.

    A fast typist (or a paste) can deliver several keys in one read;
    ``"ll"`` becomes ``["l", "l"]`` and ``"\\x1b[C\\x1b[C"`` two rights.
    """
    return _INPUT_RE.findall(data)

"""Terminal string utilities: display width, normalisation, non-breaking text.

The helpers here are thin wrappers over ``grapheme`` / ``wcwidth`` /
``unicodedata`` so the rest of the package has one place to measure and
massage text.
"""

from __future__ import annotations

import functools
import re
import unicodedata

import grapheme
import wcwidth

NBSP = "\u00a0"

# CSI (including SGR) and OSC sequences, BEL- or ST-terminated.
_ANSI_RE = re.compile(
    r"\x1b\[[0-?]*[ -/]*[@-~]"
    r"|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)"
)

_ZWJ = "\u200d"
_VS16 = "\ufe0f"


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from *text*."""
    if "\x1b" not in text:
        return text
    return _ANSI_RE.sub("", text)


def _is_emoji_sequence(cluster: str) -> bool:
    for ch in cluster[1:]:
        cp = ord(ch)
        if ch in (_ZWJ, _VS16) or 0x1F3FB <= cp <= 0x1F3FF:  # skin tones
            return True
    # Regional indicator pairs render as one flag
    return 0x1F1E6 <= ord(cluster[0]) <= 0x1F1FF


def _cluster_width(cluster: str) -> int:
    """Columns taken by one grapheme cluster.

    A cluster is as wide as its base character; combining marks after it add
    nothing. Emoji sequences are always two columns.
    """
    base = cluster[0]
    if len(cluster) > 1 and _is_emoji_sequence(cluster):
        return 2
    if unicodedata.category(base) in ("Mn", "Me", "Cf", "Cc"):
        return 0
    return max(wcwidth.wcwidth(base), 0)


@functools.lru_cache(maxsize=512)
def _measure(text: str) -> int:
    return sum(_cluster_width(c) for c in grapheme.graphemes(text))


def display_width(text: str) -> int:
    """Return the number of terminal columns *text* occupies.

    * ANSI escape sequences are ignored.
    * East Asian wide characters count as two columns.
    * A base character followed by combining marks counts as one unit.
    """
    plain = strip_ansi(text)
    if plain.isascii() and plain.isprintable():
        return len(plain)
    return _measure(plain)


def grapheme_count(text: str) -> int:
    """Return the number of user-perceived characters in *text*."""
    return grapheme.length(strip_ansi(text))


def normalize(text: str) -> str:
    """Return the NFKC (compatibility composed) form of *text*."""
    return unicodedata.normalize("NFKC", text)


def no_break(text: str) -> str:
    """Replace every Unicode space separator in *text* with a non-breaking space."""
    return "".join(NBSP if unicodedata.category(ch) == "Zs" else ch for ch in text)

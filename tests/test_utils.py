"""Tests for inline_list.utils -- width, normalisation and no-break helpers."""

from __future__ import annotations

from inline_list.utils import (
    NBSP,
    display_width,
    grapheme_count,
    no_break,
    normalize,
    strip_ansi,
)

COMPOSED_C_CEDILLA = "Ç"
DECOMPOSED_C_CEDILLA = "Ç"


# ---------------------------------------------------------------------------
# display_width
# ---------------------------------------------------------------------------


class TestDisplayWidth:
    """Measure terminal columns."""

    def test_ascii(self) -> None:
        assert display_width("abc") == 3

    def test_empty_string(self) -> None:
        assert display_width("") == 0

    def test_cjk_fullwidth_counts_as_two(self) -> None:
        assert display_width("全") == 2

    def test_single_codepoint_accented(self) -> None:
        assert display_width(COMPOSED_C_CEDILLA) == 1

    def test_combining_sequence_counts_as_one(self) -> None:
        assert display_width(DECOMPOSED_C_CEDILLA) == 1

    def test_mixed_ascii_and_wide(self) -> None:
        assert display_width("A全B") == 4

    def test_ansi_codes_do_not_count(self) -> None:
        assert display_width("\x1b[1m\x1b[38;2;1;2;3mabc\x1b[0m") == 3

    def test_only_ansi_codes(self) -> None:
        assert display_width("\x1b[0m") == 0

    def test_non_breaking_space_is_one_column(self) -> None:
        assert display_width(f"a{NBSP}b") == 3

    def test_circled_ideograph_is_wide(self) -> None:
        assert display_width("㊀") == 2

    def test_repeated_calls_are_stable(self) -> None:
        text = "全部"
        assert display_width(text) == display_width(text) == 4


class TestGraphemeCount:
    def test_combining_sequence_is_one_grapheme(self) -> None:
        assert grapheme_count(DECOMPOSED_C_CEDILLA) == 1

    def test_wide_char_is_one_grapheme(self) -> None:
        assert grapheme_count("全") == 1

    def test_ignores_ansi(self) -> None:
        assert grapheme_count("\x1b[1mab\x1b[0m") == 2


# ---------------------------------------------------------------------------
# normalize
# ---------------------------------------------------------------------------


class TestNormalize:
    """Canonical composition."""

    def test_inputs_differ_before_normalising(self) -> None:
        assert DECOMPOSED_C_CEDILLA != COMPOSED_C_CEDILLA

    def test_combining_cedilla_composes(self) -> None:
        assert normalize(DECOMPOSED_C_CEDILLA) == COMPOSED_C_CEDILLA

    def test_already_composed_is_unchanged(self) -> None:
        assert normalize(COMPOSED_C_CEDILLA) == COMPOSED_C_CEDILLA

    def test_plain_ascii_is_unchanged(self) -> None:
        assert normalize("hello") == "hello"

    def test_width_unchanged_by_normalising(self) -> None:
        assert display_width(normalize(DECOMPOSED_C_CEDILLA)) == display_width(
            DECOMPOSED_C_CEDILLA
        )


# ---------------------------------------------------------------------------
# no_break / strip_ansi
# ---------------------------------------------------------------------------


class TestNoBreak:
    def test_replaces_ascii_space(self) -> None:
        assert no_break("a b c") == f"a{NBSP}b{NBSP}c"

    def test_replaces_other_space_separators(self) -> None:
        # EN SPACE and IDEOGRAPHIC SPACE are both Zs
        assert no_break("a b　c") == f"a{NBSP}b{NBSP}c"

    def test_leaves_tabs_and_newlines(self) -> None:
        assert no_break("a\tb\nc") == "a\tb\nc"

    def test_empty(self) -> None:
        assert no_break("") == ""

    def test_no_plain_spaces_left(self) -> None:
        assert " " not in no_break(" leading and trailing ")

    def test_width_preserved(self) -> None:
        assert display_width(no_break(" Ⅰ")) == display_width(" Ⅰ")


class TestStripAnsi:
    def test_strips_sgr(self) -> None:
        assert strip_ansi("\x1b[1mbold\x1b[0m") == "bold"

    def test_plain_text_unchanged(self) -> None:
        assert strip_ansi("plain") == "plain"

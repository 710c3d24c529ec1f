"""Entry point for the inline-list demo CLI."""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys

from inline_list.inline_list import InlineList
from inline_list.styles import default_styles, plain_styles

DEMO_ITEMS = [
    "one", "two", "three", "four", "five",
    "six", "seven", "eight", "nine", "ten",
]

DEMO_PREFIXES: dict[str, str] = {
    "one": "㊀",
    "two": "㊁",
    "three": "㊂",
    "four": "㊃",
    "five": "㊄",
    "six": "㊅",
    "seven": "㊆",
    "eight": "㊇",
    "nine": "㊈",
    "ten": "㊉",
}

DEMO_SUFFIXES: dict[str, str] = {
    "one": " Ⅰ",
    "two": " Ⅱ",
    "three": " Ⅲ",
    "four": " Ⅳ",
    "five": " Ⅴ",
    "six": " Ⅵ",
    "seven": " Ⅶ",
    "eight": " Ⅷ",
    "nine": " Ⅸ",
    "ten": " Ⅹ",
}


def demo_prefix(item: str) -> str:
    return DEMO_PREFIXES.get(item, "")


def demo_suffix(item: str) -> str:
    return DEMO_SUFFIXES.get(item, "")


def build_list(
    items: list[str],
    *,
    decorations: bool = True,
    separator: str = ", ",
    focusable: bool = True,
    focused: bool = True,
    color: bool = True,
) -> InlineList[str]:
    """Build the demo list from CLI-level options."""
    widget: InlineList[str] = InlineList(
        items,
        render_prefix=demo_prefix if decorations else None,
        render_suffix=demo_suffix if decorations else None,
        separator=separator,
        styles=default_styles() if color else plain_styles(),
        focusable=focusable,
    )
    if focused:
        widget.focus()
    return widget


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="inline-list",
        description="Show items as a navigable, separator-joined line.",
    )
    parser.add_argument("items", nargs="*", help="Items to show (default: one … ten)")
    parser.add_argument("--separator", default=", ", help="Separator between items (default: ', ')")
    parser.add_argument(
        "--plain-decorations",
        action="store_true",
        help="Drop the numbered prefix and suffix of the demo items",
    )
    parser.add_argument("--no-focusable", action="store_true", help="Disable the item cursor")
    parser.add_argument("--unfocused", action="store_true", help="Start without list focus")
    parser.add_argument("--no-color", action="store_true", help="Render without ANSI styling")
    parser.add_argument("--no-help", action="store_true", help="Hide the key help line")
    parser.add_argument(
        "--log-level",
        default="warning",
        choices=["debug", "info", "warning", "error"],
    )
    parser.add_argument(
        "--log-file",
        default=os.environ.get("INLINE_LIST_LOG"),
        help="Write logs to this file (default: $INLINE_LIST_LOG; no logging if unset)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # stderr shares the screen with the widget, so logs only go to a file.
    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=getattr(logging, args.log_level.upper()),
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )

    widget = build_list(
        args.items or DEMO_ITEMS,
        decorations=not args.plain_decorations,
        separator=args.separator,
        focusable=not args.no_focusable,
        focused=not args.unfocused,
        color=not args.no_color,
    )

    if not sys.stdin.isatty() or not sys.stdout.isatty():
        widget.initialize()
        print(widget.view())
        return 0

    from inline_list.app import InlineListApp
    from inline_list.terminal import ProcessTerminal

    app = InlineListApp(widget, ProcessTerminal(), show_help=not args.no_help)
    asyncio.run(app.run())
    return 0


if __name__ == "__main__":
    sys.exit(main())

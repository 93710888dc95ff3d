"""Glyphs used to decorate picker labels and descriptions."""

from __future__ import annotations


LINK_EXTERNAL = "↗"
BRANCH = "⎇"
COMMIT = "◉"
FILE = "▤"
REPO = "▣"

DASH = "—"
DOT = "•"
ELLIPSIS = "…"


def pad(text: str, before: int = 0, after: int = 0) -> str:
    """Surround ``text`` with the given number of spaces."""

    return f"{' ' * before}{text}{' ' * after}"


SEPARATOR = pad(DASH, 2, 3)

"""Interactive prompt helpers built on InquirerPy."""

from __future__ import annotations

import sys
from typing import Any, Sequence

from InquirerPy import inquirer
from InquirerPy.base.control import Choice

from .exceptions import UserAbort


def _ensure_tty() -> None:
    if not sys.stdin.isatty():
        raise UserAbort("Interactive mode requires a TTY. Pass --yes to use the default remote.")


def format_item(item: Any) -> str:
    label = getattr(item, "label", None)
    if label is None:
        return str(item)
    description = getattr(item, "description", "")
    return f"{label} {description}" if description else label


def build_choices(items: Sequence[Any]) -> list[Choice]:
    """Wrap items in Choice objects keyed by position so duplicate labels stay distinct."""

    return [Choice(value=index, name=format_item(item)) for index, item in enumerate(items)]


async def pick_choice(items: Sequence[Any], *, placeholder: str, ignore_focus_out: bool = False) -> Any | None:
    """Fuzzy pick one of ``items``; None when nothing was chosen.

    Unless ``ignore_focus_out`` is set the prompt can be skipped, which
    dismisses it like pressing Ctrl-C does.
    """

    if not items:
        return None
    _ensure_tty()
    prompt = inquirer.fuzzy(
        message=placeholder,
        choices=build_choices(items),
        mandatory=ignore_focus_out,
    )
    try:
        index = await prompt.execute_async()
    except KeyboardInterrupt:
        return None
    if index is None:
        return None
    return items[index]

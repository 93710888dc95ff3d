"""Present remote choices and hand back what the user picked."""

from __future__ import annotations

import logging
from typing import Protocol, Sequence, TypeVar

from .choices import CommandChoice, build_remote_choices
from .config import get_quick_pick_ignore_focus_out
from .interactive import pick_choice
from .models import GitRemote, RemoteResource

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Picker(Protocol):
    """Shows ``items`` and returns the chosen one, or None when dismissed."""

    async def __call__(
        self,
        items: Sequence[T],
        *,
        placeholder: str,
        ignore_focus_out: bool,
    ) -> T | None: ...


async def present(
    choices: Sequence[CommandChoice],
    placeholder: str,
    *,
    go_back: CommandChoice | None = None,
    picker: Picker | None = None,
    ignore_focus_out: bool | None = None,
) -> CommandChoice | None:
    """Ask the user to pick one of ``choices``.

    The go-back choice, when given, is listed first. The pick is returned
    as-is and never executed here; None means the user dismissed the list.
    """

    items: list[CommandChoice] = list(choices)
    if go_back is not None:
        items.insert(0, go_back)

    if picker is None:
        picker = pick_choice
    if ignore_focus_out is None:
        ignore_focus_out = get_quick_pick_ignore_focus_out()

    pick = await picker(items, placeholder=placeholder, ignore_focus_out=ignore_focus_out)
    if pick is None:
        logger.debug("Picker dismissed: %s", placeholder)
        return None
    return pick


async def show_remotes(
    remotes: Sequence[GitRemote],
    placeholder: str,
    resource: RemoteResource,
    clipboard: bool = False,
    go_back: CommandChoice | None = None,
    *,
    picker: Picker | None = None,
    ignore_focus_out: bool | None = None,
) -> CommandChoice | None:
    """Offer one choice per supported remote for ``resource``."""

    choices = build_remote_choices(remotes, resource, clipboard)
    return await present(
        choices,
        placeholder,
        go_back=go_back,
        picker=picker,
        ignore_focus_out=ignore_focus_out,
    )

"""Command ids, their registry and the deferred open-in-remote command."""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Sequence

from .exceptions import NoRemotesError, UnknownCommandError
from .models import GitRemote, RemoteResource, resource_name

if TYPE_CHECKING:
    from .choices import CommandChoice
    from .session import Picker

logger = logging.getLogger(__name__)


class Commands:
    OPEN_IN_REMOTE = "git-smart-remote.openInRemote"


@dataclass(frozen=True)
class OpenInRemoteArgs:
    """Payload of a consolidated choice; the remote is picked when it runs."""

    remotes: Sequence[GitRemote]
    resource: RemoteResource
    go_back: CommandChoice | None = None
    clipboard: bool = False


_registry: dict[str, Callable[..., Any]] = {}


def register_command(command_id: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    def decorator(handler: Callable[..., Any]) -> Callable[..., Any]:
        _registry[command_id] = handler
        return handler

    return decorator


def registered_commands() -> list[str]:
    return sorted(_registry)


async def execute_command(command_id: str, *args: Any, **kwargs: Any) -> Any:
    """Run the handler registered for ``command_id``, awaiting it when needed."""

    try:
        handler = _registry[command_id]
    except KeyError as exc:
        raise UnknownCommandError(command_id) from exc
    logger.debug("Executing %s", command_id)
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result


def placeholder_for(resource: RemoteResource, clipboard: bool) -> str:
    name = resource_name(resource).lower() or "link"
    if clipboard:
        return f"Choose which remote to copy the url for the {name} from"
    return f"Choose which remote to open the {name} on"


@register_command(Commands.OPEN_IN_REMOTE)
async def open_in_remote(
    args: OpenInRemoteArgs,
    *,
    picker: Picker | None = None,
    ignore_focus_out: bool | None = None,
) -> Any:
    """Open (or copy) the resource on one of ``args.remotes``.

    A single supported remote is used directly. Otherwise the per-remote
    choices are presented and the picked one is executed. Returns the
    provider outcome, whatever the go-back choice returns, or None when the
    user dismissed the picker.
    """

    from .choices import build_remote_choices
    from .session import present

    choices = build_remote_choices(args.remotes, args.resource, args.clipboard)
    if not choices:
        raise NoRemotesError("No remote with a supported provider is configured.")
    if len(choices) == 1:
        return await choices[0].execute()

    pick = await present(
        choices,
        placeholder_for(args.resource, args.clipboard),
        go_back=args.go_back,
        picker=picker,
        ignore_focus_out=ignore_focus_out,
    )
    if pick is None:
        logger.debug("Remote selection cancelled")
        return None
    return await pick.execute()

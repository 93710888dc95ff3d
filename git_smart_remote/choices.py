"""Picker choices for opening or copying remote links."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Sequence

from . import glyphs
from .commands import Commands, OpenInRemoteArgs, execute_command
from .describe import describe
from .exceptions import NoRemotesError
from .models import GitRemote, RemoteResource, resource_name

logger = logging.getLogger(__name__)

GENERIC_PROVIDER_NAME = "Remote"


@dataclass
class CommandChoice:
    """One presentable item, optionally bound to a registered command."""

    label: str
    description: str = ""
    command: str | None = None
    args: tuple[Any, ...] = field(default=())

    async def execute(self, **kwargs: Any) -> Any:
        if self.command is None:
            return None
        return await execute_command(self.command, *self.args, **kwargs)


@dataclass
class OpenRemoteChoice(CommandChoice):
    """Opens or copies the resource link on one specific remote."""

    remote: GitRemote | None = None
    resource: RemoteResource | None = None
    clipboard: bool = False

    async def execute(self, **kwargs: Any) -> Any:
        provider = self.remote.provider
        if self.clipboard:
            return await provider.copy(self.resource)
        return await provider.open(self.resource)


@dataclass
class OpenRemotesChoice(CommandChoice):
    """Single entry standing for "open on the right remote".

    ``remote`` is the remote the label names when one could be chosen up
    front; the command still receives every remote and resolves at run time.
    """

    remote: GitRemote | None = None
    resource: RemoteResource | None = None


def remote_choice(remote: GitRemote, resource: RemoteResource, clipboard: bool = False) -> OpenRemoteChoice:
    provider = remote.provider
    name = resource_name(resource)
    if clipboard:
        label = f"{glyphs.LINK_EXTERNAL} Copy {name} Url to Clipboard from {provider.name}"
    else:
        label = f"{glyphs.LINK_EXTERNAL} Open {name} on {provider.name}"
    return OpenRemoteChoice(
        label=label,
        description=f"{glyphs.SEPARATOR} {glyphs.REPO} {provider.path}",
        remote=remote,
        resource=resource,
        clipboard=clipboard,
    )


def build_remote_choices(
    remotes: Sequence[GitRemote],
    resource: RemoteResource,
    clipboard: bool = False,
) -> list[OpenRemoteChoice]:
    """One choice per supported remote, in configuration order."""

    choices = []
    for remote in remotes:
        if remote.provider is None:
            logger.debug("Skipping remote %s: unsupported provider", remote.name)
            continue
        choices.append(remote_choice(remote, resource, clipboard))
    return choices


def select_default_remote(remotes: Sequence[GitRemote]) -> GitRemote | None:
    """Pick the remote to use without asking, if the choice is unambiguous."""

    if len(remotes) > 1:
        return next((remote for remote in remotes if remote.default), None)
    if len(remotes) == 1:
        return remotes[0]
    return None


def shared_provider_name(remotes: Sequence[GitRemote]) -> str:
    """The provider name every remote shares, or the generic name."""

    names = {remote.provider.name if remote.provider is not None else None for remote in remotes}
    if len(names) == 1 and None not in names:
        return names.pop()
    return GENERIC_PROVIDER_NAME


def consolidated_choice(
    remotes: Sequence[GitRemote],
    resource: RemoteResource,
    go_back: CommandChoice | None = None,
    clipboard: bool = False,
) -> OpenRemotesChoice:
    if not remotes:
        raise NoRemotesError("No remotes to open the link on.")

    description = describe(resource)
    resource = description.resource
    name = resource_name(resource)
    args = (OpenInRemoteArgs(remotes=list(remotes), resource=resource, go_back=go_back, clipboard=clipboard),)

    remote = select_default_remote(remotes)
    if remote is not None and remote.provider is not None:
        logger.debug("Using remote %s for %s", remote.name, name)
        return OpenRemotesChoice(
            label=f"{glyphs.LINK_EXTERNAL} Open {name} on {remote.provider.name}",
            description=(
                f"{glyphs.SEPARATOR} {glyphs.REPO} {remote.provider.path} "
                f"{glyphs.pad(glyphs.DOT, 1, 1)} {description}"
            ),
            command=Commands.OPEN_IN_REMOTE,
            args=args,
            remote=remote,
            resource=resource,
        )

    provider_name = shared_provider_name(remotes)
    return OpenRemotesChoice(
        label=f"{glyphs.LINK_EXTERNAL} Open {name} on {provider_name}{glyphs.ELLIPSIS}",
        description=f"{glyphs.SEPARATOR} {description}",
        command=Commands.OPEN_IN_REMOTE,
        args=args,
        resource=resource,
    )

"""Discover configured remotes and match them to providers."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Mapping
from urllib.parse import urlparse

from . import git
from .config import get_default_remote, get_remote_hosts
from .exceptions import ValidationError
from .models import GitRemote
from .providers import provider_for_host

logger = logging.getLogger(__name__)

_SCP_LIKE = re.compile(r"^(?:[^@/]+@)?(?P<host>[^:/]+):(?P<path>[^/].*)$")


def parse_remote_url(url: str) -> tuple[str, str]:
    """Split a remote url into ``(host, "owner/name")``."""

    url = url.strip()
    match = None if "://" in url else _SCP_LIKE.match(url)
    if match:
        host, path = match.group("host"), match.group("path")
    else:
        parsed = urlparse(url)
        host = parsed.hostname or ""
        path = parsed.path
    path = path.strip("/")
    if path.endswith(".git"):
        path = path[: -len(".git")]
    if not host or not path:
        raise ValidationError(f"Unsupported remote URL: {url}")
    parts = [part for part in path.split("/") if part]
    if len(parts) < 2:
        raise ValidationError("Remote URL must look like <host>/<owner>/<repo>.")
    return host.lower(), "/".join(parts)


def build_remote(
    name: str,
    url: str,
    *,
    default: bool = False,
    extra_hosts: Mapping[str, str] | None = None,
) -> GitRemote:
    try:
        host, path = parse_remote_url(url)
    except ValidationError as exc:
        logger.debug("Remote %s has no provider: %s", name, exc)
        return GitRemote(name=name, url=url, default=default)
    provider = provider_for_host(host, path, extra_hosts=extra_hosts)
    if provider is None:
        logger.debug("Remote %s points at unknown host %s", name, host)
    return GitRemote(name=name, url=url, provider=provider, default=default)


def parse_remotes(
    output: str,
    *,
    default_remote: str | None = None,
    extra_hosts: Mapping[str, str] | None = None,
) -> list[GitRemote]:
    """Parse ``git remote -v`` output, keeping configuration order."""

    remotes: dict[str, GitRemote] = {}
    for raw in output.splitlines():
        fields = raw.split()
        if len(fields) < 2:
            continue
        name, url = fields[0], fields[1]
        kind = fields[2] if len(fields) > 2 else "(fetch)"
        if kind != "(fetch)" or name in remotes:
            continue
        remotes[name] = build_remote(
            name,
            url,
            default=name == default_remote,
            extra_hosts=extra_hosts,
        )
    return list(remotes.values())


def load_remotes(repo_path: Path) -> list[GitRemote]:
    return parse_remotes(
        git.remote_verbose(repo_path),
        default_remote=get_default_remote(),
        extra_hosts=get_remote_hosts(),
    )

"""Environment driven settings and repository resolution."""

from __future__ import annotations

import os
import shlex
from dataclasses import dataclass
from pathlib import Path

from .exceptions import GitCommandError, ValidationError
from .git import rev_parse_toplevel

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Config:
    """Defaults used when the environment does not override them."""

    ignore_focus_out: bool = False
    default_remote: str = "origin"


def get_quick_pick_ignore_focus_out() -> bool:
    raw = os.getenv("GSR_IGNORE_FOCUS_OUT")
    if raw is None:
        return Config.ignore_focus_out
    return raw.strip().lower() in _TRUTHY


def get_default_remote() -> str:
    return os.getenv("GSR_DEFAULT_REMOTE", "").strip() or Config.default_remote


def get_remote_hosts() -> dict[str, str]:
    """Extra host to provider type mappings, e.g. ``git.acme.io=gitlab``."""

    hosts: dict[str, str] = {}
    raw = os.getenv("GSR_REMOTE_HOSTS", "")
    for item in raw.split(","):
        item = item.strip()
        if not item:
            continue
        host, sep, kind = item.partition("=")
        if not sep or not host.strip() or not kind.strip():
            raise ValidationError(f"Invalid GSR_REMOTE_HOSTS entry: {item!r}. Expected host=type.")
        hosts[host.strip().lower()] = kind.strip().lower()
    return hosts


def get_clipboard_command() -> list[str] | None:
    raw = os.getenv("GSR_CLIPBOARD_COMMAND", "").strip()
    if not raw:
        return None
    return shlex.split(raw)


def resolve_repo_path(repo_override: Path | None = None) -> Path:
    if repo_override:
        candidate = repo_override.expanduser()
        if not candidate.exists():
            raise ValidationError(f"Repository override path does not exist: {candidate}")
        cwd = candidate
    else:
        cwd = Path.cwd()
    try:
        return rev_parse_toplevel(cwd)
    except GitCommandError as exc:  # pragma: no cover - rely on git error text
        raise ValidationError("Current directory is not inside a git repository.") from exc

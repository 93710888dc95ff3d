"""Thin wrappers around git CLI commands."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Iterable

from .exceptions import GitCommandError
from .models import GitLogCommit

logger = logging.getLogger(__name__)

SHORT_SHA_LENGTH = 8
UNCOMMITTED_SHA = "0" * 40
STAGED_UNCOMMITTED_SHA = f"{UNCOMMITTED_SHA}:"


def run_git(
    args: Iterable[str],
    *,
    cwd: Path,
    raise_on_error: bool = True,
) -> subprocess.CompletedProcess[str]:
    """Execute a git command and optionally raise on failure."""

    cmd = ["git", *args]
    logger.debug("Running %s in %s", " ".join(cmd), cwd)
    proc = subprocess.run(
        cmd,
        cwd=str(cwd),
        capture_output=True,
        text=True,
        check=False,
    )
    if raise_on_error and proc.returncode != 0:
        raise GitCommandError(cmd, proc.returncode, stdout=proc.stdout, stderr=proc.stderr)
    return proc


def is_uncommitted(sha: str | None) -> bool:
    return sha is not None and sha.rstrip(":") == UNCOMMITTED_SHA


def is_staged_uncommitted(sha: str | None) -> bool:
    return sha == STAGED_UNCOMMITTED_SHA


def shorten_sha(sha: str | None) -> str:
    """Return the short form of ``sha``; missing shas shorten to an empty string."""

    if not sha:
        return ""
    if is_staged_uncommitted(sha):
        return "Index"
    if is_uncommitted(sha):
        return "Working Tree"
    return sha[:SHORT_SHA_LENGTH]


def rev_parse_toplevel(path: Path) -> Path:
    proc = run_git(["rev-parse", "--show-toplevel"], cwd=path)
    return Path(proc.stdout.strip())


def rev_parse(path: Path, ref: str = "HEAD") -> str:
    proc = run_git(["rev-parse", "--verify", f"{ref}^{{commit}}"], cwd=path)
    return proc.stdout.strip()


def remote_verbose(path: Path) -> str:
    proc = run_git(["remote", "-v"], cwd=path)
    return proc.stdout


def current_branch(path: Path) -> str | None:
    # Empty output when in detached HEAD state.
    proc = run_git(["branch", "--show-current"], cwd=path, raise_on_error=False)
    if proc.returncode != 0:
        return None
    return proc.stdout.strip() or None


def log_file_commit(path: Path, file_name: str, ref: str = "HEAD") -> GitLogCommit | None:
    """Return the last commit at or before ``ref`` that touched ``file_name``."""

    proc = run_git(
        ["log", "-1", "--format=%H%x00%P", "--name-status", ref, "--", file_name],
        cwd=path,
    )
    return parse_file_log(proc.stdout)


def parse_file_log(output: str) -> GitLogCommit | None:
    lines = [line for line in output.splitlines() if line.strip()]
    if not lines:
        return None
    sha, _, parents = lines[0].partition("\0")
    previous = parents.split()[0] if parents.split() else None
    status = None
    for line in lines[1:]:
        code, sep, _ = line.partition("\t")
        if sep:
            status = code[:1]
            break
    return GitLogCommit(sha=sha.strip(), previous_sha=previous, status=status, is_file=True)

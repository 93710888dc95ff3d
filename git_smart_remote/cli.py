"""Typer-based CLI for git-smart-remote."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, Callable

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import git
from .choices import consolidated_choice, remote_choice
from .config import resolve_repo_path
from .exceptions import GitSmartRemoteError, NoRemotesError, ValidationError
from .models import (
    BranchesResource,
    BranchResource,
    CommitResource,
    FileResource,
    GitRemote,
    LineRange,
    RemoteResource,
    RepoResource,
    RevisionResource,
)
from .remotes import load_remotes

app = typer.Typer(
    help="Open or copy links to files, commits and branches on your git remotes",
    add_completion=False,
    no_args_is_help=True,
)
console = Console()

CopyOption = typer.Option(False, "--copy", "-c", help="Copy the url to the clipboard instead of opening it.")
YesOption = typer.Option(False, "--yes", "-y", help="Use the default remote without asking.")


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


@app.callback()
def main(
    ctx: typer.Context,
    repo: Path | None = typer.Option(
        None,
        "--repo",
        help="Path to the git repository whose remotes should be used.",
        exists=False,
        dir_okay=True,
        file_okay=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Show additional debug information."),
) -> None:
    configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["repo_override"] = repo
    ctx.obj["verbose"] = verbose


@app.command(help="List remotes and the provider each one maps to")
def remotes(ctx: typer.Context) -> None:
    try:
        repo_path = resolve_repo_path(ctx.obj.get("repo_override"))
        entries = load_remotes(repo_path)
    except GitSmartRemoteError as err:
        _fail(str(err))
    if not entries:
        console.print("No remotes configured.")
        return
    table = Table(show_header=True, header_style="bold")
    table.add_column("Name")
    table.add_column("Provider")
    table.add_column("Path")
    table.add_column("Default")
    for remote in entries:
        provider = remote.provider
        table.add_row(
            remote.name,
            provider.name if provider else "[dim]unsupported[/dim]",
            escape(provider.path) if provider else escape(remote.url),
            "✓" if remote.default else "",
        )
    console.print(table)


@app.command(help="Open a file on a remote")
def file(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="File to link to."),
    line: str | None = typer.Option(None, "--line", "-l", help="Line or range to highlight, e.g. 10 or 10-20."),
    rev: str | None = typer.Option(None, "--rev", help="Link to the file as of this revision."),
    copy: bool = CopyOption,
    yes: bool = YesOption,
) -> None:
    def build(repo_path: Path) -> RemoteResource:
        file_name = _relative_file_name(repo_path, path)
        line_range = parse_line_range(line) if line else None
        if rev:
            sha = git.rev_parse(repo_path, rev)
            commit = git.log_file_commit(repo_path, file_name, sha)
            return RevisionResource(file_name=file_name, sha=sha, commit=commit, range=line_range)
        return FileResource(file_name=file_name, branch=git.current_branch(repo_path), range=line_range)

    _open(ctx, build, clipboard=copy, assume_default=yes)


@app.command(help="Open a commit on a remote")
def commit(
    ctx: typer.Context,
    ref: str = typer.Argument("HEAD", help="Commit, tag or other reference."),
    copy: bool = CopyOption,
    yes: bool = YesOption,
) -> None:
    _open(ctx, lambda repo_path: CommitResource(sha=git.rev_parse(repo_path, ref)), clipboard=copy, assume_default=yes)


@app.command(help="Open a branch on a remote")
def branch(
    ctx: typer.Context,
    name: str | None = typer.Argument(None, help="Branch name; defaults to the current branch."),
    copy: bool = CopyOption,
    yes: bool = YesOption,
) -> None:
    def build(repo_path: Path) -> RemoteResource:
        branch_name = name or git.current_branch(repo_path)
        if not branch_name:
            raise ValidationError("HEAD is detached. Pass a branch name explicitly.")
        return BranchResource(branch=branch_name)

    _open(ctx, build, clipboard=copy, assume_default=yes)


@app.command(help="Open the branch list on a remote")
def branches(ctx: typer.Context, copy: bool = CopyOption, yes: bool = YesOption) -> None:
    _open(ctx, lambda repo_path: BranchesResource(), clipboard=copy, assume_default=yes)


@app.command(help="Open the repository on a remote")
def repo(ctx: typer.Context, copy: bool = CopyOption, yes: bool = YesOption) -> None:
    _open(ctx, lambda repo_path: RepoResource(), clipboard=copy, assume_default=yes)


def _open(
    ctx: typer.Context,
    build: Callable[[Path], RemoteResource],
    *,
    clipboard: bool,
    assume_default: bool,
) -> None:
    try:
        repo_path = resolve_repo_path(ctx.obj.get("repo_override"))
        resource = build(repo_path)
        supported = _supported_remotes(load_remotes(repo_path))
        outcome = asyncio.run(run_choice(supported, resource, clipboard=clipboard, assume_default=assume_default))
    except GitSmartRemoteError as err:
        _fail(str(err))
    if outcome is None:
        console.print("Cancelled.")
        return
    verb = "Copied" if clipboard else "Opened"
    console.print(f"{verb} {escape(str(outcome))}")


async def run_choice(
    remotes: list[GitRemote],
    resource: RemoteResource,
    *,
    clipboard: bool = False,
    assume_default: bool = False,
) -> Any:
    """Run the consolidated choice, or its default remote directly."""

    choice = consolidated_choice(remotes, resource, clipboard=clipboard)
    console.print(f"{escape(choice.label)} [dim]{escape(choice.description)}[/dim]")
    if assume_default and choice.remote is not None:
        return await remote_choice(choice.remote, choice.resource, clipboard).execute()
    return await choice.execute()


def _supported_remotes(entries: list[GitRemote]) -> list[GitRemote]:
    supported = [remote for remote in entries if remote.is_supported]
    if not supported:
        raise NoRemotesError("No remote points at a supported provider (GitHub, GitLab, Bitbucket).")
    return supported


def _relative_file_name(repo_path: Path, path: Path) -> str:
    target = path.expanduser()
    if not target.is_absolute():
        target = Path.cwd() / target
    try:
        return target.resolve().relative_to(repo_path.resolve()).as_posix()
    except ValueError as exc:
        raise ValidationError(f"{path} is not inside {repo_path}.") from exc


def parse_line_range(value: str) -> LineRange:
    start, sep, end = value.partition("-")
    try:
        line_range = LineRange(start=int(start), end=int(end) if sep else None)
    except ValueError as exc:
        raise ValidationError(f"Invalid line range: {value!r}. Use 10 or 10-20.") from exc
    if line_range.start < 1 or (line_range.end is not None and line_range.end < line_range.start):
        raise ValidationError(f"Invalid line range: {value!r}.")
    return line_range


def _fail(message: str, code: int = 1) -> None:
    typer.secho(message, err=True, fg=typer.colors.RED)
    raise typer.Exit(code)


if __name__ == "__main__":
    app()

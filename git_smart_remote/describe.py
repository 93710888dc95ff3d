"""Human readable descriptions of remote resources."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import PurePosixPath

from . import glyphs
from .git import shorten_sha
from .models import (
    BranchesResource,
    BranchResource,
    CommitResource,
    FileResource,
    RemoteResource,
    RepoResource,
    RevisionResource,
)


@dataclass(frozen=True)
class Description:
    """Glyph and text for a resource, plus the resource links should target.

    ``resource`` differs from the described one only for revisions backed by a
    file commit: it then points at the sha where the file content lives.
    """

    glyph: str
    text: str
    resource: RemoteResource

    def __str__(self) -> str:
        if not self.text:
            return ""
        return f"{self.glyph} {self.text}"


def describe(resource: RemoteResource) -> Description:
    if isinstance(resource, BranchResource):
        return Description(glyphs.BRANCH, resource.branch, resource)
    if isinstance(resource, BranchesResource):
        return Description(glyphs.BRANCH, "Branches", resource)
    if isinstance(resource, CommitResource):
        return Description(glyphs.COMMIT, shorten_sha(resource.sha), resource)
    if isinstance(resource, FileResource):
        return Description(glyphs.FILE, basename(resource.file_name), resource)
    if isinstance(resource, RepoResource):
        return Description(glyphs.REPO, "Repository", resource)
    if isinstance(resource, RevisionResource):
        return _describe_revision(resource)
    return Description("", "", resource)


def _describe_revision(resource: RevisionResource) -> Description:
    name = basename(resource.file_name)
    commit = resource.commit
    if commit is not None and commit.is_file:
        if commit.is_deleted:
            # The file is gone at the commit itself, link to its parent instead.
            resource = replace(resource, sha=commit.previous_sha)
            text = (
                f"{name} in {glyphs.COMMIT} {shorten_sha(commit.previous_sha)} "
                f"(deleted in {glyphs.COMMIT} {shorten_sha(commit.sha)})"
            )
        else:
            resource = replace(resource, sha=commit.sha)
            text = f"{name} in {glyphs.COMMIT} {shorten_sha(commit.sha)}"
        return Description(glyphs.FILE, text, resource)

    short = shorten_sha(resource.sha)
    text = f"{name} in {glyphs.COMMIT} {short}" if short else name
    return Description(glyphs.FILE, text, resource)


def basename(file_name: str | None) -> str:
    if not file_name:
        return ""
    return PurePosixPath(file_name.replace("\\", "/")).name

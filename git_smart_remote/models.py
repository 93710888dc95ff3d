"""Dataclasses shared across modules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Protocol, Union, runtime_checkable


class RemoteResourceType(str, Enum):
    BRANCH = "branch"
    BRANCHES = "branches"
    COMMIT = "commit"
    FILE = "file"
    REPO = "repo"
    REVISION = "revision"


@runtime_checkable
class RemoteProvider(Protocol):
    """A hosting service able to open or copy links for one repository."""

    @property
    def name(self) -> str: ...

    @property
    def path(self) -> str: ...

    async def open(self, resource: RemoteResource) -> Any: ...

    async def copy(self, resource: RemoteResource) -> Any: ...


@dataclass(frozen=True)
class LineRange:
    """One-based, inclusive line selection within a file."""

    start: int
    end: int | None = None


@dataclass(frozen=True)
class GitLogCommit:
    """The commit record git reports for a single file."""

    sha: str
    previous_sha: str | None = None
    status: str | None = None
    is_file: bool = False

    @property
    def is_deleted(self) -> bool:
        return self.status == "D"


@dataclass(frozen=True)
class BranchResource:
    branch: str

    type: ClassVar[RemoteResourceType] = RemoteResourceType.BRANCH


@dataclass(frozen=True)
class BranchesResource:
    type: ClassVar[RemoteResourceType] = RemoteResourceType.BRANCHES


@dataclass(frozen=True)
class CommitResource:
    sha: str

    type: ClassVar[RemoteResourceType] = RemoteResourceType.COMMIT


@dataclass(frozen=True)
class FileResource:
    file_name: str
    branch: str | None = None
    range: LineRange | None = None

    type: ClassVar[RemoteResourceType] = RemoteResourceType.FILE


@dataclass(frozen=True)
class RepoResource:
    type: ClassVar[RemoteResourceType] = RemoteResourceType.REPO


@dataclass(frozen=True)
class RevisionResource:
    file_name: str
    sha: str | None = None
    commit: GitLogCommit | None = None
    range: LineRange | None = None

    type: ClassVar[RemoteResourceType] = RemoteResourceType.REVISION


RemoteResource = Union[
    BranchResource,
    BranchesResource,
    CommitResource,
    FileResource,
    RepoResource,
    RevisionResource,
]

_RESOURCE_NAMES = {
    RemoteResourceType.BRANCH: "Branch",
    RemoteResourceType.BRANCHES: "Branches",
    RemoteResourceType.COMMIT: "Commit",
    RemoteResourceType.FILE: "File",
    RemoteResourceType.REPO: "Repository",
    RemoteResourceType.REVISION: "Revision",
}


def resource_name(resource: object) -> str:
    """Short noun used in picker labels, e.g. ``"File"``."""

    return _RESOURCE_NAMES.get(getattr(resource, "type", None), "")


@dataclass(frozen=True)
class GitRemote:
    """A configured remote; ``provider`` is None when the host is not supported."""

    name: str
    url: str
    provider: RemoteProvider | None = None
    default: bool = False

    @property
    def is_supported(self) -> bool:
        return self.provider is not None

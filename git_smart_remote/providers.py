"""Hosting service adapters that turn resources into web urls."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, ClassVar, Mapping
from urllib.parse import quote

import typer

from .clipboard import copy_text
from .describe import basename
from .models import (
    BranchesResource,
    BranchResource,
    CommitResource,
    FileResource,
    LineRange,
    RemoteProvider,
    RemoteResource,
    RepoResource,
    RevisionResource,
)

logger = logging.getLogger(__name__)

__all__ = [
    "RemoteProvider",
    "RemoteProviderBase",
    "GitHubProvider",
    "GitLabProvider",
    "BitbucketProvider",
    "PROVIDER_TYPES",
    "provider_for_host",
]


@dataclass(frozen=True)
class RemoteProviderBase:
    """Shared url building; subclasses supply the host specific paths."""

    domain: str
    path: str
    protocol: str = "https"
    custom_name: str | None = None

    default_name: ClassVar[str] = "Remote"

    @property
    def name(self) -> str:
        return self.custom_name or self.default_name

    @property
    def base_url(self) -> str:
        return f"{self.protocol}://{self.domain}/{self.path}"

    def url(self, resource: RemoteResource) -> str:
        if isinstance(resource, BranchResource):
            return self.branch_url(resource.branch)
        if isinstance(resource, BranchesResource):
            return self.branches_url()
        if isinstance(resource, CommitResource):
            return self.commit_url(resource.sha)
        if isinstance(resource, FileResource):
            return self.file_url(resource.file_name, branch=resource.branch, line_range=resource.range)
        if isinstance(resource, RevisionResource):
            return self.file_url(resource.file_name, sha=resource.sha, line_range=resource.range)
        if isinstance(resource, RepoResource):
            return self.base_url
        raise TypeError(f"Unsupported resource: {resource!r}")

    def branch_url(self, branch: str) -> str:
        raise NotImplementedError

    def branches_url(self) -> str:
        raise NotImplementedError

    def commit_url(self, sha: str) -> str:
        raise NotImplementedError

    def file_url(
        self,
        file_name: str,
        *,
        sha: str | None = None,
        branch: str | None = None,
        line_range: LineRange | None = None,
    ) -> str:
        raise NotImplementedError

    async def open(self, resource: RemoteResource) -> str:
        url = self.url(resource)
        logger.debug("Opening %s", url)
        await asyncio.to_thread(typer.launch, url)
        return url

    async def copy(self, resource: RemoteResource) -> str:
        url = self.url(resource)
        await asyncio.to_thread(copy_text, url)
        return url


def _ref(sha: str | None, branch: str | None) -> str:
    return sha or branch or "HEAD"


def _quote(value: str) -> str:
    return quote(value, safe="/")


class GitHubProvider(RemoteProviderBase):
    default_name = "GitHub"

    def branch_url(self, branch: str) -> str:
        return f"{self.base_url}/tree/{_quote(branch)}"

    def branches_url(self) -> str:
        return f"{self.base_url}/branches"

    def commit_url(self, sha: str) -> str:
        return f"{self.base_url}/commit/{sha}"

    def file_url(self, file_name, *, sha=None, branch=None, line_range=None) -> str:
        anchor = ""
        if line_range is not None:
            anchor = f"#L{line_range.start}"
            if line_range.end is not None and line_range.end != line_range.start:
                anchor += f"-L{line_range.end}"
        return f"{self.base_url}/blob/{_quote(_ref(sha, branch))}/{_quote(file_name)}{anchor}"


class GitLabProvider(RemoteProviderBase):
    default_name = "GitLab"

    def branch_url(self, branch: str) -> str:
        return f"{self.base_url}/-/tree/{_quote(branch)}"

    def branches_url(self) -> str:
        return f"{self.base_url}/-/branches"

    def commit_url(self, sha: str) -> str:
        return f"{self.base_url}/-/commit/{sha}"

    def file_url(self, file_name, *, sha=None, branch=None, line_range=None) -> str:
        anchor = ""
        if line_range is not None:
            anchor = f"#L{line_range.start}"
            if line_range.end is not None and line_range.end != line_range.start:
                anchor += f"-{line_range.end}"
        return f"{self.base_url}/-/blob/{_quote(_ref(sha, branch))}/{_quote(file_name)}{anchor}"


class BitbucketProvider(RemoteProviderBase):
    default_name = "Bitbucket"

    def branch_url(self, branch: str) -> str:
        return f"{self.base_url}/branch/{_quote(branch)}"

    def branches_url(self) -> str:
        return f"{self.base_url}/branches"

    def commit_url(self, sha: str) -> str:
        return f"{self.base_url}/commits/{sha}"

    def file_url(self, file_name, *, sha=None, branch=None, line_range=None) -> str:
        anchor = ""
        if line_range is not None:
            anchor = f"#{basename(file_name)}-{line_range.start}"
            if line_range.end is not None and line_range.end != line_range.start:
                anchor += f":{line_range.end}"
        return f"{self.base_url}/src/{_quote(_ref(sha, branch))}/{_quote(file_name)}{anchor}"


PROVIDER_TYPES: Mapping[str, Callable[..., RemoteProviderBase]] = {
    "github": GitHubProvider,
    "gitlab": GitLabProvider,
    "bitbucket": BitbucketProvider,
}


def provider_for_host(
    host: str,
    path: str,
    *,
    extra_hosts: Mapping[str, str] | None = None,
) -> RemoteProviderBase | None:
    """Match ``host`` to a provider, first by explicit mapping then by name."""

    host = host.lower()
    kind = (extra_hosts or {}).get(host)
    if kind is None:
        kind = next((key for key in PROVIDER_TYPES if key in host), None)
    factory = PROVIDER_TYPES.get(kind) if kind else None
    if factory is None:
        return None
    return factory(domain=host, path=path)

"""Tests for provider url building and side effects."""

from __future__ import annotations

import unittest
from unittest import mock

from git_smart_remote.models import (
    BranchesResource,
    BranchResource,
    CommitResource,
    FileResource,
    LineRange,
    RemoteProvider,
    RepoResource,
    RevisionResource,
)
from git_smart_remote.providers import (
    BitbucketProvider,
    GitHubProvider,
    GitLabProvider,
    provider_for_host,
)


class GitHubUrlTests(unittest.TestCase):
    def setUp(self) -> None:
        self.provider = GitHubProvider(domain="github.com", path="org/repo")

    def test_name_and_protocol(self) -> None:
        self.assertEqual(self.provider.name, "GitHub")
        self.assertIsInstance(self.provider, RemoteProvider)
        self.assertEqual(GitHubProvider(domain="gh.acme.io", path="a/b", custom_name="Acme").name, "Acme")

    def test_urls(self) -> None:
        base = "https://github.com/org/repo"
        self.assertEqual(self.provider.url(RepoResource()), base)
        self.assertEqual(self.provider.url(BranchResource(branch="feature/x")), f"{base}/tree/feature/x")
        self.assertEqual(self.provider.url(BranchesResource()), f"{base}/branches")
        self.assertEqual(self.provider.url(CommitResource(sha="abc123")), f"{base}/commit/abc123")

    def test_file_urls(self) -> None:
        base = "https://github.com/org/repo/blob"
        self.assertEqual(
            self.provider.url(FileResource(file_name="src/a b.py", branch="main", range=LineRange(3, 9))),
            f"{base}/main/src/a%20b.py#L3-L9",
        )
        self.assertEqual(self.provider.url(FileResource(file_name="README.md")), f"{base}/HEAD/README.md")
        self.assertEqual(
            self.provider.url(RevisionResource(file_name="a.py", sha="abc123", range=LineRange(5))),
            f"{base}/abc123/a.py#L5",
        )

    def test_unknown_resource_raises(self) -> None:
        with self.assertRaises(TypeError):
            self.provider.url(object())


class OtherProviderUrlTests(unittest.TestCase):
    def test_gitlab(self) -> None:
        provider = GitLabProvider(domain="gitlab.com", path="group/sub/repo")

        self.assertEqual(provider.url(BranchesResource()), "https://gitlab.com/group/sub/repo/-/branches")
        self.assertEqual(
            provider.url(RevisionResource(file_name="a.py", sha="abc", range=LineRange(1, 4))),
            "https://gitlab.com/group/sub/repo/-/blob/abc/a.py#L1-4",
        )

    def test_bitbucket(self) -> None:
        provider = BitbucketProvider(domain="bitbucket.org", path="team/repo")

        self.assertEqual(provider.url(CommitResource(sha="abc")), "https://bitbucket.org/team/repo/commits/abc")
        self.assertEqual(
            provider.url(FileResource(file_name="src/a.py", branch="dev", range=LineRange(2, 3))),
            "https://bitbucket.org/team/repo/src/dev/src/a.py#a.py-2:3",
        )


class ProviderSideEffectTests(unittest.IsolatedAsyncioTestCase):
    async def test_open_launches_url(self) -> None:
        provider = GitHubProvider(domain="github.com", path="org/repo")

        with mock.patch("git_smart_remote.providers.typer.launch") as launch:
            url = await provider.open(RepoResource())

        launch.assert_called_once_with("https://github.com/org/repo")
        self.assertEqual(url, "https://github.com/org/repo")

    async def test_copy_writes_clipboard(self) -> None:
        provider = GitLabProvider(domain="gitlab.com", path="org/repo")

        with mock.patch("git_smart_remote.providers.copy_text") as copy_text:
            url = await provider.copy(CommitResource(sha="abc"))

        copy_text.assert_called_once_with("https://gitlab.com/org/repo/-/commit/abc")
        self.assertEqual(url, "https://gitlab.com/org/repo/-/commit/abc")


class ProviderForHostTests(unittest.TestCase):
    def test_matches_known_hosts(self) -> None:
        self.assertIsInstance(provider_for_host("github.com", "o/r"), GitHubProvider)
        self.assertIsInstance(provider_for_host("GitLab.example.com", "o/r"), GitLabProvider)
        self.assertIsInstance(provider_for_host("bitbucket.org", "o/r"), BitbucketProvider)

    def test_unknown_host(self) -> None:
        self.assertIsNone(provider_for_host("git.example.com", "o/r"))

    def test_extra_hosts_mapping(self) -> None:
        provider = provider_for_host("git.acme.io", "o/r", extra_hosts={"git.acme.io": "gitlab"})

        self.assertIsInstance(provider, GitLabProvider)
        self.assertEqual(provider.base_url, "https://git.acme.io/o/r")
        self.assertIsNone(provider_for_host("git.acme.io", "o/r", extra_hosts={"git.acme.io": "gitea"}))


if __name__ == "__main__":
    unittest.main()

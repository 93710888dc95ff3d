"""Test doubles shared by the test modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

from git_smart_remote.models import GitRemote


@dataclass
class FakeProvider:
    name: str
    path: str
    calls: list[tuple[str, Any]] = field(default_factory=list)

    async def open(self, resource: Any) -> str:
        self.calls.append(("open", resource))
        return f"opened {self.name}"

    async def copy(self, resource: Any) -> str:
        self.calls.append(("copy", resource))
        return f"copied {self.name}"


def make_remote(name: str, provider_name: str | None, path: str = "org/repo", default: bool = False) -> GitRemote:
    provider = FakeProvider(provider_name, path) if provider_name else None
    return GitRemote(name=name, url=f"https://example.com/{path}.git", provider=provider, default=default)


class FakePicker:
    """Records what was shown and answers with a preset choice."""

    def __init__(self, answer: Any = None, *, index: int | None = None):
        self.answer = answer
        self.index = index
        self.calls: list[dict[str, Any]] = []

    async def __call__(self, items: Sequence[Any], *, placeholder: str, ignore_focus_out: bool) -> Any:
        self.calls.append({"items": list(items), "placeholder": placeholder, "ignore_focus_out": ignore_focus_out})
        if self.index is not None:
            return items[self.index]
        return self.answer

"""Tests for presenting choices through a picker."""

from __future__ import annotations

import os
import unittest
from unittest import mock

from fakes import FakePicker, make_remote

from git_smart_remote.choices import CommandChoice, build_remote_choices
from git_smart_remote.models import FileResource, RepoResource
from git_smart_remote.session import present, show_remotes


class PresentTests(unittest.IsolatedAsyncioTestCase):
    async def test_go_back_is_returned_when_picked(self) -> None:
        go_back = CommandChoice(label="← Back")
        picker = FakePicker(index=0)

        pick = await present([], "Choose", go_back=go_back, picker=picker, ignore_focus_out=False)

        self.assertIs(pick, go_back)
        self.assertEqual(picker.calls[0]["items"], [go_back])

    async def test_dismissed_picker_returns_none(self) -> None:
        choices = build_remote_choices([make_remote("origin", "GitHub")], RepoResource())
        picker = FakePicker(answer=None)

        pick = await present(choices, "Choose", picker=picker, ignore_focus_out=True)

        self.assertIsNone(pick)
        self.assertNotIn(pick, choices)

    async def test_go_back_comes_first_then_construction_order(self) -> None:
        remotes = [make_remote(name, "GitHub", f"org/{name}") for name in ("b", "a", "c")]
        choices = build_remote_choices(remotes, RepoResource())
        go_back = CommandChoice(label="back")
        picker = FakePicker(index=2)

        pick = await present(choices, "Pick a remote", go_back=go_back, picker=picker, ignore_focus_out=False)

        shown = picker.calls[0]["items"]
        self.assertIs(shown[0], go_back)
        self.assertEqual(shown[1:], choices)
        self.assertIs(pick, choices[1])
        self.assertEqual(picker.calls[0]["placeholder"], "Pick a remote")

    async def test_picked_choice_is_not_executed(self) -> None:
        remote = make_remote("origin", "GitHub")
        picker = FakePicker(index=0)

        await show_remotes([remote], "Choose", FileResource(file_name="a.py"), picker=picker, ignore_focus_out=False)

        self.assertEqual(remote.provider.calls, [])

    async def test_ignore_focus_out_defaults_to_config(self) -> None:
        picker = FakePicker(answer=None)

        with mock.patch.dict(os.environ, {"GSR_IGNORE_FOCUS_OUT": "yes"}):
            await present([CommandChoice(label="x")], "Choose", picker=picker)

        self.assertTrue(picker.calls[0]["ignore_focus_out"])

    async def test_show_remotes_hides_unsupported_remotes(self) -> None:
        remotes = [make_remote("local", None), make_remote("origin", "GitHub")]
        picker = FakePicker(answer=None)

        await show_remotes(remotes, "Choose", RepoResource(), clipboard=True, picker=picker, ignore_focus_out=False)

        shown = picker.calls[0]["items"]
        self.assertEqual(len(shown), 1)
        self.assertIn("Copy Repository Url to Clipboard from GitHub", shown[0].label)


if __name__ == "__main__":
    unittest.main()

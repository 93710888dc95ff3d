"""Tests for clipboard tool selection."""

from __future__ import annotations

import os
import subprocess
import unittest
from unittest import mock

from git_smart_remote import clipboard
from git_smart_remote.exceptions import ClipboardError


class ClipboardTests(unittest.TestCase):
    def test_configured_command_wins(self) -> None:
        with mock.patch.dict(os.environ, {"GSR_CLIPBOARD_COMMAND": "my-copy --stdin"}):
            self.assertEqual(clipboard.clipboard_command(), ["my-copy", "--stdin"])

    def test_missing_tools_raise(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            with mock.patch("git_smart_remote.clipboard.shutil.which", return_value=None):
                with self.assertRaises(ClipboardError):
                    clipboard.clipboard_command()

    def test_copy_text_pipes_text(self) -> None:
        done = subprocess.CompletedProcess(["cat"], 0, stdout="", stderr="")
        with mock.patch.dict(os.environ, {"GSR_CLIPBOARD_COMMAND": "cat"}):
            with mock.patch("git_smart_remote.clipboard.subprocess.run", return_value=done) as run:
                clipboard.copy_text("https://example.com")

        self.assertEqual(run.call_args.kwargs["input"], "https://example.com")

    def test_copy_text_failure(self) -> None:
        failed = subprocess.CompletedProcess(["cat"], 1, stdout="", stderr="no display")
        with mock.patch.dict(os.environ, {"GSR_CLIPBOARD_COMMAND": "cat"}):
            with mock.patch("git_smart_remote.clipboard.subprocess.run", return_value=failed):
                with self.assertRaises(ClipboardError):
                    clipboard.copy_text("x")


if __name__ == "__main__":
    unittest.main()

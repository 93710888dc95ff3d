"""Copy text to the system clipboard through the platform's clipboard tool."""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys
from typing import Sequence

from .config import get_clipboard_command
from .exceptions import ClipboardError

logger = logging.getLogger(__name__)

_CANDIDATES: Sequence[Sequence[str]] = (
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
)


def clipboard_command() -> list[str]:
    configured = get_clipboard_command()
    if configured:
        return configured
    if sys.platform == "darwin":
        candidates: Sequence[Sequence[str]] = (("pbcopy",),)
    elif sys.platform.startswith("win"):
        candidates = (("clip",),)
    else:
        candidates = _CANDIDATES
    for candidate in candidates:
        if shutil.which(candidate[0]) is not None:
            return list(candidate)
    raise ClipboardError(
        "No clipboard tool found in PATH. Install one of wl-copy, xclip or xsel, "
        "or set GSR_CLIPBOARD_COMMAND."
    )


def copy_text(text: str) -> None:
    command = clipboard_command()
    logger.debug("Copying to clipboard with %s", " ".join(command))
    try:
        result = subprocess.run(
            command,
            input=text,
            text=True,
            capture_output=True,
            check=False,
        )
    except OSError as exc:
        raise ClipboardError(f"Could not run {command[0]}: {exc}") from exc
    if result.returncode != 0:
        details = (result.stderr or "").strip() or "Unknown clipboard error."
        raise ClipboardError(details)

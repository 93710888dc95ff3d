"""Custom exception hierarchy for git-smart-remote."""


class GitSmartRemoteError(RuntimeError):
    """Base error for all custom exceptions."""


class GitCommandError(GitSmartRemoteError):
    """Raised when a git invocation fails."""

    def __init__(
        self,
        command: list[str],
        returncode: int,
        *,
        stdout: str | None = None,
        stderr: str | None = None,
    ):
        self.command = command
        self.returncode = returncode
        self.stdout = stdout or ""
        self.stderr = stderr or ""
        message = "Git command failed"
        if command:
            message = f"Git command failed (exit {returncode}): {' '.join(command)}"
        if self.stderr.strip():
            message = f"{message}\n{self.stderr.strip()}"
        super().__init__(message)


class ValidationError(GitSmartRemoteError):
    """Raised when user input or a remote URL is invalid."""


class NoRemotesError(GitSmartRemoteError):
    """Raised when there is no remote with a known provider to offer."""


class UnknownCommandError(GitSmartRemoteError):
    """Raised when dispatching a command id nobody registered."""

    def __init__(self, command_id: str):
        super().__init__(f"Unknown command: {command_id}")
        self.command_id = command_id


class ClipboardError(GitSmartRemoteError):
    """Raised when the url cannot be written to the clipboard."""


class UserAbort(GitSmartRemoteError):
    """Raised when an interactive flow cannot run or is aborted."""


__all__ = [
    "GitSmartRemoteError",
    "GitCommandError",
    "ValidationError",
    "NoRemotesError",
    "UnknownCommandError",
    "ClipboardError",
    "UserAbort",
]

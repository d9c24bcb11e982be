"""Exceptions raised by the create-app pipeline stages.

Every stage signals failure by raising a ``ScaffoldError`` subclass; the
pipeline's terminal handler turns them into console output and exit code 1.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every failure that aborts a run."""


class InvalidNameError(ScaffoldError):
    """Raised when the project name breaks npm naming restrictions."""

    def __init__(
        self,
        name: str,
        errors: list[str] | None = None,
        warnings: list[str] | None = None,
    ) -> None:
        self.name = name
        self.errors = list(errors or [])
        self.warnings = list(warnings or [])
        super().__init__(
            f'Could not create a project called "{name}" '
            "because of npm naming restrictions"
        )

    @property
    def violations(self) -> list[str]:
        """Errors followed by warnings, in display order."""
        return self.errors + self.warnings


class DirectoryConflictError(ScaffoldError):
    """Raised when the target path exists but is not a directory."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"{path} already exists and is not a directory.")


class OverwriteDeclinedError(ScaffoldError):
    """Raised when the user refuses to reuse an existing directory."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Not overwriting {path}.")


class TemplateError(ScaffoldError):
    """Raised when the bundled template tree cannot be found."""


class ManifestError(ScaffoldError):
    """Raised when the generated package.json is missing or malformed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot patch {path}: {reason}")


class CommandError(ScaffoldError):
    """Raised when a child process exits with a non-zero code."""

    def __init__(self, command: list[str], returncode: int) -> None:
        self.command = list(command)
        self.returncode = returncode
        super().__init__(
            f"`{self.command_line}` has failed (exit {returncode})."
        )

    @property
    def command_line(self) -> str:
        return " ".join(self.command)


class InstallError(CommandError):
    """Raised when the dependency installer fails."""

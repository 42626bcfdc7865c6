"""Exception taxonomy for create-vv.

Every failure the scaffolder can raise derives from ``ScaffoldError`` so the
CLI can report it as a single human-readable message.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""


class FatalAbort(ScaffoldError):
    """Raised when the user explicitly cancels the run."""

    def __init__(self, message: str = "Operation cancelled") -> None:
        super().__init__(message)


class FilesystemError(ScaffoldError):
    """Raised when the target path cannot be inspected, created or written."""

    def __init__(self, path: str | Path, message: str) -> None:
        self.path = Path(path)
        super().__init__(f"{message}: {self.path}")


class ManifestParseError(ScaffoldError):
    """Raised when a template's ``package.json`` is not a valid JSON object."""


class NameValidationError(ScaffoldError):
    """Raised when a chosen or derived package name is not a valid name.

    Recoverable: the caller should ask for an explicit name and retry.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Invalid package.json name: {name!r}")


class OverwriteRequiredError(ScaffoldError):
    """Raised when a non-empty target arrives without an overwrite decision."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(
            f"Target directory {self.path} is not empty and no overwrite decision was made"
        )

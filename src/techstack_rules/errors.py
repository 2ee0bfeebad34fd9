"""Error types raised by the install pipeline."""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "InstallerError",
    "TargetExistsError",
    "SourceMissingError",
    "InstallFilesystemError",
]


class InstallerError(Exception):
    """Base class for install pipeline errors."""

    pass


class TargetExistsError(InstallerError):
    """Target path is already occupied and --force was not given."""

    def __init__(self, target: Path) -> None:
        self.target = target
        super().__init__(f"Rules directory already exists at: {target}")


class SourceMissingError(InstallerError):
    """Bundled rules directory is missing or empty.

    This points at a broken package, not at anything the user did.
    """

    def __init__(self, source: Path, reason: str = "not found") -> None:
        self.source = source
        super().__init__(
            f"Source rules directory {reason}: {source}. Package may be corrupted."
        )


class InstallFilesystemError(InstallerError):
    """An operating system error interrupted the install."""

    def __init__(self, action: str, path: Path, cause: OSError) -> None:
        self.action = action
        self.path = path
        self.cause = cause
        detail = cause.strerror or str(cause)
        super().__init__(f"Failed to {action} {path}: {detail}")

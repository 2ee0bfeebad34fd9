"""Protocol definitions for core abstractions.

Commands and the installer depend on these interfaces rather than on
concrete classes, so tests can hand in doubles without inheritance.
All concrete implementations satisfy these protocols structurally.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Protocol, runtime_checkable

from techstack_rules.types import InstallRequest, InstallResult


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for the filesystem operations the installer performs."""

    def exists(self, path: Path) -> bool:
        """Check if a path exists."""
        ...

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        ...

    def mkdir(self, path: Path, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory."""
        ...

    def unlink(self, path: Path) -> None:
        """Remove a file."""
        ...

    def rmtree(self, path: Path) -> None:
        """Remove a directory tree."""
        ...

    def copytree(self, src: Path, dst: Path) -> None:
        """Copy a directory tree to a destination that does not exist."""
        ...

    def iter_files(self, root: Path) -> Iterator[Path]:
        """Yield every regular file below root, recursively."""
        ...


@runtime_checkable
class RulesInstallerProtocol(Protocol):
    """Protocol for the rules install pipeline."""

    source_path: Path

    def install(self, request: InstallRequest, base_dir: Path) -> InstallResult:
        """Run resolve, guard, copy and report for one request.

        Args:
            request: The install options.
            base_dir: Directory relative path options are joined onto.

        Returns:
            InstallResult describing the outcome. Known failures are
            returned, never raised.
        """
        ...

    def list_rules(self) -> list[Path]:
        """List bundled documentation files relative to the source tree."""
        ...

"""Application context for dependency injection.

This module separates object creation from object use, enabling testability
and reducing coupling in CLI commands.

Dependencies are typed using Protocols rather than concrete implementations,
so test doubles can be injected without inheritance.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from techstack_rules.config import InstallerConfig
from techstack_rules.protocols import FileSystem, RulesInstallerProtocol


def _default_filesystem() -> FileSystem:
    """Create the default filesystem implementation."""
    from techstack_rules.filesystem import RealFileSystem
    return RealFileSystem()


@dataclass
class AppContext:
    """Container for application dependencies.

    Provides a single injection point for all services used by CLI commands.
    """

    installer: RulesInstallerProtocol
    project_root: Path
    config: InstallerConfig = field(default_factory=InstallerConfig)
    filesystem: FileSystem = field(default_factory=_default_filesystem)


def create_context(
    project_root: Path | None = None,
    source_path: Path | None = None,
) -> AppContext:
    """Factory for application dependencies.

    Creates all services with proper wiring. Use this in production code.
    For tests, construct AppContext directly with test doubles.

    Args:
        project_root: Override project base directory (found from cwd if None).
        source_path: Override bundled rules directory (for testing).

    Returns:
        Configured AppContext with all dependencies.
    """
    from techstack_rules.filesystem import RealFileSystem
    from techstack_rules.install import RulesInstaller
    from techstack_rules.paths import find_project_root

    config = InstallerConfig(source_path=source_path) if source_path else InstallerConfig()
    filesystem = RealFileSystem()
    installer = RulesInstaller.create(config=config, filesystem=filesystem)

    return AppContext(
        installer=installer,
        project_root=project_root.resolve() if project_root else find_project_root(),
        config=config,
        filesystem=filesystem,
    )

"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from techstack_rules.config import InstallerConfig
from techstack_rules.install import RulesInstaller


def snapshot(root: Path) -> dict[str, bytes]:
    """Map every file below root (as a posix relative path) to its bytes."""
    return {
        path.relative_to(root).as_posix(): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    """Create a small bundled rules tree with three markdown files."""
    source = tmp_path / "bundle"
    (source / "nested" / "deep").mkdir(parents=True)
    (source / "a.md").write_text("# A\n")
    (source / "nested" / "b.md").write_text("# B\n")
    (source / "nested" / "deep" / "c.md").write_text("# C\n")
    (source / "notes.txt").write_text("not a rule")
    return source


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Create an empty consumer project directory."""
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def config(source_tree: Path) -> InstallerConfig:
    """Configuration pointing at the test rules tree."""
    return InstallerConfig(source_path=source_tree)


@pytest.fixture
def installer(config: InstallerConfig) -> RulesInstaller:
    """Create a RulesInstaller using the factory method."""
    return RulesInstaller.create(config=config)


# ============================================================================
# Mock FileSystem Fixture
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock tracks all filesystem operations without touching real files.
    """
    fs = MagicMock()
    fs.exists.return_value = False
    fs.is_dir.return_value = False
    fs.iter_files.return_value = iter([])
    return fs

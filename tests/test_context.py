"""Tests for context module."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

from techstack_rules.config import InstallerConfig
from techstack_rules.context import AppContext, create_context
from techstack_rules.filesystem import RealFileSystem


class TestAppContext:
    """Tests for AppContext dataclass."""

    def test_defaults(self, tmp_path: Path) -> None:
        """Test context creates default config and filesystem if not provided."""
        installer = MagicMock()
        ctx = AppContext(installer=installer, project_root=tmp_path)

        assert ctx.installer is installer
        assert isinstance(ctx.config, InstallerConfig)
        assert isinstance(ctx.filesystem, RealFileSystem)


class TestCreateContext:
    """Tests for create_context factory function."""

    def test_respects_overrides(self, tmp_path: Path, source_tree: Path) -> None:
        ctx = create_context(project_root=tmp_path, source_path=source_tree)

        assert ctx.project_root == tmp_path.resolve()
        assert ctx.config.source_path == source_tree
        assert ctx.installer.source_path == source_tree

    def test_project_root_found_from_cwd(self, tmp_path: Path, monkeypatch) -> None:
        (tmp_path / ".git").mkdir()
        (tmp_path / "sub").mkdir()
        monkeypatch.chdir(tmp_path / "sub")

        ctx = create_context()

        assert ctx.project_root == tmp_path.resolve()

    def test_shares_filesystem(self, tmp_path: Path) -> None:
        ctx = create_context(project_root=tmp_path)

        assert ctx.installer.fs is ctx.filesystem

"""Tests for target path resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from techstack_rules.paths import find_project_root, resolve_target_path


class TestResolveTargetPath:
    """Tests for resolve_target_path."""

    def test_absolute_option_returned_unchanged(self, tmp_path: Path) -> None:
        """An absolute option ignores the base directory."""
        option = str(tmp_path / "custom" / "rules")

        assert resolve_target_path(option, Path("/somewhere/else")) == Path(option)

    @pytest.mark.parametrize(
        "option",
        [".claude/rules/techstack", "rules", "../shared/rules"],
    )
    def test_relative_option_joined_onto_base(self, option: str) -> None:
        """A relative option is joined onto the base directory."""
        base = Path("/work/app")

        assert resolve_target_path(option, base) == base / option

    def test_does_not_touch_filesystem(self, tmp_path: Path) -> None:
        """Resolution works for paths that do not exist."""
        base = tmp_path / "missing-project"

        result = resolve_target_path("rules", base)

        assert result == base / "rules"
        assert not base.exists()


class TestFindProjectRoot:
    """Tests for find_project_root."""

    def test_finds_nearest_git_directory(self, tmp_path: Path) -> None:
        """Walks up to the directory holding .git."""
        (tmp_path / ".git").mkdir()
        nested = tmp_path / "app" / "src"
        nested.mkdir(parents=True)

        assert find_project_root(nested) == tmp_path.resolve()

    def test_falls_back_to_start_directory(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Without a .git ancestor the start directory is the root."""
        monkeypatch.setattr(Path, "exists", lambda self: False)

        assert find_project_root(tmp_path) == tmp_path.resolve()

    def test_defaults_to_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """With no start path the current directory is used."""
        (tmp_path / ".git").mkdir()
        monkeypatch.chdir(tmp_path)

        assert find_project_root() == tmp_path.resolve()

"""Tests for configuration and bundled assets."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from techstack_rules.assets import get_rules_path
from techstack_rules.config import DEFAULT_TARGET_PATH, InstallerConfig
from techstack_rules.install import RulesInstaller


class TestInstallerConfig:
    """Tests for InstallerConfig model."""

    def test_defaults(self) -> None:
        config = InstallerConfig()
        assert config.default_target == DEFAULT_TARGET_PATH == ".claude/rules/techstack"
        assert config.doc_extension == ".md"
        assert config.source_path == get_rules_path()

    def test_extension_without_dot_is_normalized(self) -> None:
        assert InstallerConfig(doc_extension="md").doc_extension == ".md"

    def test_empty_extension_rejected(self) -> None:
        with pytest.raises(ValidationError):
            InstallerConfig(doc_extension="")


class TestBundledRules:
    """The rules shipped with the package."""

    def test_rules_directory_is_bundled(self) -> None:
        rules = get_rules_path()
        assert rules.is_dir()
        assert rules.name == "rules"

    def test_bundled_rules_are_listed(self) -> None:
        """Every bundled rule is a markdown file and the set is non-empty."""
        installer = RulesInstaller.create()

        rules = installer.list_rules()

        assert Path("README.md") in rules
        assert Path("laravel/controllers.md") in rules
        assert Path("vue/components.md") in rules
        assert len(rules) == len(list(get_rules_path().rglob("*.md")))

"""Installer configuration."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from techstack_rules.assets import get_rules_path

# Where rules land inside a project when --path is not given
DEFAULT_TARGET_PATH = ".claude/rules/techstack"

# Suffix of the files counted as installed rules
DOC_EXTENSION = ".md"

# Environment variable consulted for the --path option
TARGET_PATH_ENVVAR = "TECHSTACK_RULES_PATH"


class InstallerConfig(BaseModel):
    """Effective settings for an installer run."""

    model_config = ConfigDict(frozen=True)

    default_target: str = DEFAULT_TARGET_PATH
    doc_extension: str = DOC_EXTENSION
    source_path: Path = Field(default_factory=get_rules_path)

    @field_validator("doc_extension")
    @classmethod
    def _dotted(cls, value: str) -> str:
        if not value:
            raise ValueError("doc_extension cannot be empty")
        return value if value.startswith(".") else f".{value}"

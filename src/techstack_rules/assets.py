"""Location of the rules bundled with this package."""

from __future__ import annotations

from pathlib import Path

RULES_DIR_NAME = "rules"


def get_rules_path() -> Path:
    """Return the directory holding the bundled rule files."""
    return Path(__file__).resolve().parent / RULES_DIR_NAME

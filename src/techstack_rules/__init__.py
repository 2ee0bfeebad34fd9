"""Installer for bundled Claude Code techstack rules."""

import logging

__version__ = "0.1.0"

# Failures are reported by the CLI; log records stay silent unless --verbose
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Export protocol interfaces for type hints and dependency injection
from techstack_rules.protocols import (
    FileSystem,
    RulesInstallerProtocol,
)

__all__ = [
    "__version__",
    "FileSystem",
    "RulesInstallerProtocol",
]

"""Shared data types for the rules installer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

__all__ = ["FailureKind", "InstallRequest", "InstallResult", "InstallStage"]


class InstallStage(str, Enum):
    """Pipeline stages. Transitions only ever move forward."""

    RESOLVING = "resolving"
    GUARDING = "guarding"
    COPYING = "copying"
    REPORTING = "reporting"
    DONE_SUCCESS = "done-success"
    DONE_FAILURE = "done-failure"

    @property
    def is_terminal(self) -> bool:
        return self in (InstallStage.DONE_SUCCESS, InstallStage.DONE_FAILURE)


class FailureKind(str, Enum):
    """Why an install failed."""

    TARGET_EXISTS = "target-exists"
    SOURCE_MISSING = "source-missing"
    FILESYSTEM = "filesystem"


class InstallRequest(BaseModel):
    """Options for a single install run, fixed once created."""

    model_config = ConfigDict(frozen=True)

    target_path_option: str
    force: bool = False

    @field_validator("target_path_option")
    @classmethod
    def _not_empty(cls, value: str) -> str:
        # "" would resolve to the project root itself
        if not value:
            raise ValueError("target path cannot be empty")
        return value


@dataclass
class InstallResult:
    """Result of an install run.

    Attributes:
        resolved_target_path: Absolute path the rules were (or would be) installed to.
        copied_file_count: Number of documentation files found in the target.
        succeeded: True if the install completed.
        failure_reason: Error message (None on success).
        failure_kind: Category of the failure (None on success).
        replaced_existing: True if a previous target was removed first.
    """

    resolved_target_path: Path
    copied_file_count: int = 0
    succeeded: bool = True
    failure_reason: str | None = None
    failure_kind: FailureKind | None = None
    replaced_existing: bool = False

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.succeeded and (self.failure_reason is not None or self.failure_kind is not None):
            raise ValueError("succeeded=True but failure is set")
        if not self.succeeded and (self.failure_reason is None or self.failure_kind is None):
            raise ValueError("succeeded=False requires failure reason and kind")
        if self.copied_file_count < 0:
            raise ValueError("copied_file_count cannot be negative")

    @property
    def exit_code(self) -> int:
        """Process exit status for this result."""
        return 0 if self.succeeded else 1

    @classmethod
    def failure(
        cls, target: Path, kind: FailureKind, reason: str
    ) -> InstallResult:
        """Build a failed result."""
        return cls(
            resolved_target_path=target,
            succeeded=False,
            failure_reason=reason,
            failure_kind=kind,
        )

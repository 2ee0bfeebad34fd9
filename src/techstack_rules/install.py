"""Install pipeline for the bundled techstack rules."""

from __future__ import annotations

import logging
from pathlib import Path

from techstack_rules.config import InstallerConfig
from techstack_rules.errors import (
    InstallerError,
    InstallFilesystemError,
    SourceMissingError,
    TargetExistsError,
)
from techstack_rules.filesystem import RealFileSystem
from techstack_rules.paths import resolve_target_path
from techstack_rules.protocols import FileSystem
from techstack_rules.types import FailureKind, InstallRequest, InstallResult, InstallStage

logger = logging.getLogger(__name__)

_STAGE_ORDER = list(InstallStage)


class RulesInstaller:
    """Copies the bundled rules tree into a project.

    A run moves through resolve, guard, copy and report in that order.
    An existing target is only ever replaced as a whole, and only when the
    request carries force=True.

    Follows Separate Use from Creation: constructor requires all dependencies.
    Use factory method `create()` for production instantiation with defaults.
    """

    def __init__(
        self,
        source_path: Path,
        filesystem: FileSystem,
        doc_extension: str,
    ) -> None:
        """Initialize installer with required dependencies.

        Args:
            source_path: Directory holding the bundled rule files.
            filesystem: Filesystem abstraction.
            doc_extension: Suffix of files counted in the report, e.g. ".md".
        """
        self.source_path = source_path
        self.fs = filesystem
        self.doc_extension = doc_extension
        self.stage = InstallStage.RESOLVING

    @classmethod
    def create(
        cls,
        config: InstallerConfig | None = None,
        filesystem: FileSystem | None = None,
    ) -> RulesInstaller:
        """Factory method for production instantiation.

        Args:
            config: Optional configuration (defaults used if not provided).
            filesystem: Optional filesystem abstraction (created if not provided).

        Returns:
            Configured RulesInstaller instance.
        """
        config = config or InstallerConfig()
        return cls(
            source_path=config.source_path,
            filesystem=filesystem or RealFileSystem(),
            doc_extension=config.doc_extension,
        )

    def install(self, request: InstallRequest, base_dir: Path) -> InstallResult:
        """Run the whole pipeline for one request.

        Args:
            request: Target path option and force flag.
            base_dir: Project directory relative options are joined onto.

        Returns:
            InstallResult. Installer errors are reported in the result
            instead of being raised.
        """
        self.stage = InstallStage.RESOLVING
        target = resolve_target_path(request.target_path_option, base_dir)
        logger.debug("Resolved target %r to %s", request.target_path_option, target)

        try:
            self._advance(InstallStage.GUARDING)
            # The source is checked before the guard may delete anything
            self.check_source()
            replaced = self.guard(target, request.force)
            self._advance(InstallStage.COPYING)
            self.copy(target)
        except TargetExistsError as e:
            return self.report_failure(target, FailureKind.TARGET_EXISTS, e)
        except SourceMissingError as e:
            return self.report_failure(target, FailureKind.SOURCE_MISSING, e)
        except InstallFilesystemError as e:
            return self.report_failure(target, FailureKind.FILESYSTEM, e)

        self._advance(InstallStage.REPORTING)
        result = self.report(target, replaced_existing=replaced)
        self._advance(InstallStage.DONE_SUCCESS)
        return result

    def check_source(self) -> None:
        """Verify the bundled rules tree exists and has files.

        Raises:
            SourceMissingError: If the directory is absent or empty.
        """
        if not self.fs.is_dir(self.source_path):
            raise SourceMissingError(self.source_path)
        if next(iter(self.fs.iter_files(self.source_path)), None) is None:
            raise SourceMissingError(self.source_path, "is empty")

    def guard(self, target: Path, force: bool) -> bool:
        """Decide what to do with whatever already occupies the target.

        Args:
            target: Resolved install path.
            force: Whether the user opted in to replacing an existing target.

        Returns:
            True if an existing target was removed, False if there was none.

        Raises:
            TargetExistsError: If the target exists and force is False.
            InstallFilesystemError: If the existing target cannot be removed.
        """
        if not self.fs.exists(target):
            return False
        if not force:
            raise TargetExistsError(target)

        logger.info("Removing existing target %s", target)
        try:
            if self.fs.is_dir(target):
                self.fs.rmtree(target)
            else:
                self.fs.unlink(target)
        except OSError as e:
            raise InstallFilesystemError("remove", target, e) from e
        return True

    def copy(self, target: Path) -> None:
        """Copy the bundled tree to a target that does not exist yet.

        A copy that fails midway is rolled back so the target is left absent.

        Args:
            target: Resolved install path.

        Raises:
            SourceMissingError: If the bundled tree is absent or empty.
            TargetExistsError: If something already occupies the target.
            InstallFilesystemError: If creating or writing the target fails.
        """
        self.check_source()
        # Rollback only ever removes what this call created
        if self.fs.exists(target):
            raise TargetExistsError(target)
        try:
            self.fs.mkdir(target.parent, parents=True, exist_ok=True)
        except OSError as e:
            raise InstallFilesystemError("create", target.parent, e) from e

        logger.debug("Copying %s -> %s", self.source_path, target)
        try:
            self.fs.copytree(self.source_path, target)
        except OSError as e:
            self._rollback(target)
            raise InstallFilesystemError("copy rules to", target, e) from e

    def report(self, target: Path, replaced_existing: bool = False) -> InstallResult:
        """Summarize a completed install.

        Args:
            target: Populated install path.
            replaced_existing: Whether a previous target was removed.

        Returns:
            Successful InstallResult with the documentation file count.
        """
        count = self.count_docs(target)
        logger.info("Installed %d rule files to %s", count, target)
        return InstallResult(
            resolved_target_path=target,
            copied_file_count=count,
            replaced_existing=replaced_existing,
        )

    def report_failure(
        self, target: Path, kind: FailureKind, error: InstallerError
    ) -> InstallResult:
        """Summarize a failed install, carrying the error's message."""
        self.stage = InstallStage.DONE_FAILURE
        if kind is FailureKind.TARGET_EXISTS:
            logger.warning("%s", error)
        else:
            logger.error("Install to %s failed: %s", target, error)
        return InstallResult.failure(target, kind, str(error))

    def count_docs(self, directory: Path) -> int:
        """Count files below directory whose suffix is the doc extension."""
        return sum(
            1 for path in self.fs.iter_files(directory) if path.suffix == self.doc_extension
        )

    def list_rules(self) -> list[Path]:
        """List bundled rule files relative to the source tree.

        Raises:
            SourceMissingError: If the bundled tree is absent or empty.
        """
        self.check_source()
        return [
            path.relative_to(self.source_path)
            for path in self.fs.iter_files(self.source_path)
            if path.suffix == self.doc_extension
        ]

    def _advance(self, stage: InstallStage) -> None:
        """Move to the next stage, refusing to go backwards."""
        if self.stage.is_terminal or _STAGE_ORDER.index(stage) <= _STAGE_ORDER.index(self.stage):
            raise RuntimeError(f"Invalid stage transition {self.stage.value} -> {stage.value}")
        self.stage = stage

    def _rollback(self, target: Path) -> None:
        """Remove a partially written target."""
        if not self.fs.exists(target):
            return
        try:
            self.fs.rmtree(target)
            logger.info("Removed partially copied target %s", target)
        except OSError:
            logger.exception("Could not remove partially copied target %s", target)

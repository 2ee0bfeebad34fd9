"""Target path resolution."""

from __future__ import annotations

from pathlib import Path


def find_project_root(start_path: Path | None = None) -> Path:
    """Find the base directory of the consumer project.

    Walks up from start_path to the nearest directory containing .git.

    Args:
        start_path: Starting directory. Defaults to cwd.

    Returns:
        Path to the project root, or the resolved start directory if it
        is not inside a git repository.
    """
    start = (start_path or Path.cwd()).resolve()
    path = start
    while path != path.parent:
        if (path / ".git").exists():
            return path
        path = path.parent
    # Check root directory as well
    if (path / ".git").exists():
        return path
    return start


def resolve_target_path(option: str, base_dir: Path) -> Path:
    """Turn a path option into the directory rules are installed to.

    Absolute options are returned unchanged. Anything else is joined onto
    base_dir. The filesystem is never consulted.

    Example:
        >>> resolve_target_path("/opt/rules", Path("/work/app"))
        PosixPath('/opt/rules')
        >>> resolve_target_path(".claude/rules", Path("/work/app"))
        PosixPath('/work/app/.claude/rules')
    """
    path = Path(option)
    if path.is_absolute():
        return path
    return base_dir / path

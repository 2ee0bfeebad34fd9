"""CLI commands using Typer."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Annotated

if TYPE_CHECKING:
    from techstack_rules.types import InstallResult

import typer
from pydantic import ValidationError
from rich.markup import escape

from techstack_rules import __version__
from techstack_rules.config import TARGET_PATH_ENVVAR
from techstack_rules.console import TUI, configure_logging
from techstack_rules.context import create_context
from techstack_rules.errors import SourceMissingError
from techstack_rules.types import FailureKind, InstallRequest

app = typer.Typer(
    name="techstack-rules",
    help="Install or update Claude Code techstack rules",
    no_args_is_help=True,
)

config_app = typer.Typer(help="Configuration commands")

app.add_typer(config_app, name="config")

tui = TUI()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        tui.console.print(f"techstack-rules v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", help="Enable debug logging")
    ] = False,
) -> None:
    """Install or update Claude Code techstack rules."""
    configure_logging(verbose)


# ============================================================================
# Install Commands
# ============================================================================


def _show_result(result: InstallResult, path_option: str | None = None) -> None:
    """Print the outcome of an install run.

    Args:
        result: Outcome of the run.
        path_option: The --path value the user gave, repeated in the --force hint.
    """
    if not result.succeeded:
        tui.show_error(escape(result.failure_reason or "Install failed"))
        if result.failure_kind is FailureKind.TARGET_EXISTS:
            tui.show_force_hint(path_option)
        return

    if result.replaced_existing:
        tui.show_info("Removed existing rules directory.")
    tui.console.print()
    tui.show_success(
        f"Successfully installed {result.copied_file_count} rule files to: "
        f"{escape(str(result.resolved_target_path))}"
    )
    tui.console.print()
    tui.console.print("Your Claude Code rules are ready to use!")


@app.command()
def update(
    path: Annotated[
        str | None,
        typer.Option(
            "--path",
            envvar=TARGET_PATH_ENVVAR,
            help="The path where rules should be installed [default: .claude/rules/techstack]",
        ),
    ] = None,
    force: Annotated[bool, typer.Option("--force", help="Overwrite existing rules")] = False,
    project_root: Annotated[
        Path | None,
        typer.Option("--project-root", help="Base directory for relative paths"),
    ] = None,
    _context=None,
) -> None:
    """Install or update the techstack rules."""
    ctx = _context or create_context(project_root=project_root)

    try:
        request = InstallRequest(
            target_path_option=path if path is not None else ctx.config.default_target,
            force=force,
        )
    except ValidationError as e:
        tui.show_error("Invalid --path: target path cannot be empty")
        raise typer.Exit(1) from e

    result = ctx.installer.install(request, ctx.project_root)
    _show_result(result, path)
    if not result.succeeded:
        raise typer.Exit(result.exit_code)


@app.command("list")
def list_rules(
    _context=None,
) -> None:
    """List the bundled rule files."""
    ctx = _context or create_context()

    try:
        rules = ctx.installer.list_rules()
    except SourceMissingError as e:
        tui.show_error(escape(str(e)))
        raise typer.Exit(1) from e
    tui.show_rules(rules, ctx.installer.source_path)


# ============================================================================
# Config Commands
# ============================================================================


@config_app.command("show")
def config_show(
    _context=None,
) -> None:
    """Show current configuration."""
    ctx = _context or create_context()
    tui.show_config(ctx.config, ctx.project_root)


if __name__ == "__main__":
    app()

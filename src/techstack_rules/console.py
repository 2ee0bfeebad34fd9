"""Console output for CLI commands."""

from __future__ import annotations

import logging
import shlex
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from techstack_rules.config import InstallerConfig


def configure_logging(verbose: bool) -> None:
    """Route log records through Rich when verbose output is requested."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


class TUI:
    """Text output helpers for techstack-rules."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize TUI.

        Args:
            console: Console to print to. A new one is created if omitted.
        """
        self.console = console or Console()

    def show_success(self, message: str) -> None:
        """Show success message.

        Args:
            message: Success message.
        """
        self.console.print(f"[green]\u2713[/green] {message}")

    def show_error(self, message: str) -> None:
        """Show error message.

        Args:
            message: Error message.
        """
        self.console.print(f"[red]\u2717[/red] {message}")

    def show_warning(self, message: str) -> None:
        """Show warning message.

        Args:
            message: Warning message.
        """
        self.console.print(f"[yellow]![/yellow] {message}")

    def show_info(self, message: str) -> None:
        """Show info message.

        Args:
            message: Info message.
        """
        self.console.print(f"[blue]i[/blue] {message}")

    def show_force_hint(self, path_option: str | None = None) -> None:
        """Explain how to replace an existing rules directory.

        Args:
            path_option: The --path value to repeat in the suggested command.
        """
        command = "techstack-rules update"
        if path_option is not None:
            command += f" --path {shlex.quote(path_option)}"
        self.console.print()
        self.console.print("Use --force to overwrite existing rules:")
        self.console.print(f"  {command} --force", markup=False, highlight=False)
        self.console.print()
        self.show_warning("Using --force will overwrite any customizations you have made.")

    def show_rules(self, rules: list[Path], source: Path) -> None:
        """Display the bundled rule files.

        Args:
            rules: Rule file paths relative to source.
            source: Bundled rules directory.
        """
        table = Table(title=f"Bundled rules ({len(rules)})")
        table.add_column("Group", style="cyan")
        table.add_column("File")

        for rule in rules:
            group = rule.parent.as_posix() if rule.parent != Path(".") else "-"
            table.add_row(escape(group), escape(rule.name))

        self.console.print(table)
        self.console.print(f"[dim]Source: {escape(str(source))}[/dim]", highlight=False)

    def show_config(self, config: InstallerConfig, project_root: Path) -> None:
        """Display the effective configuration."""
        self.console.print("\n[bold]Configuration[/bold]")
        self.console.print(f"  Project root: {escape(str(project_root))}")
        self.console.print(f"  Default target: {escape(config.default_target)}")
        self.console.print(f"  Rule extension: {escape(config.doc_extension)}")
        self.console.print(f"  Bundled rules: {escape(str(config.source_path))}")

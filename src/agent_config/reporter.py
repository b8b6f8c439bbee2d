"""Rich console output for the installer."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn

from agent_config.config import VERSION


class ConsoleReporter:
    """Writes progress and results to a rich Console.

    Components receive a reporter instead of printing, so tests can pass a
    console that writes to a buffer, or a MagicMock.
    """

    def __init__(
        self, console: Console | None = None, error_console: Console | None = None
    ) -> None:
        """Initialize the reporter.

        Args:
            console: Console to write to. Defaults to a new stdout console.
            error_console: Console for error lines. Defaults to a new stderr console.
        """
        self.console = console or Console()
        self.error_console = error_console or Console(stderr=True)

    def show_intro(self, title: str) -> None:
        """Display the opening banner."""
        self.console.print(
            Panel(
                f"[bold blue]{escape(title)}[/bold blue] v{VERSION}\n"
                "Install AI coding agent skills, commands and base configuration",
                border_style="blue",
            )
        )

    def show_outro(self, message: str) -> None:
        """Display the closing line."""
        self.console.print()
        self.console.print(f"[bold]{escape(message)}[/bold]")

    def show_success(self, message: str) -> None:
        """Show success message."""
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def show_error(self, message: str) -> None:
        """Show error message on the error console."""
        self.error_console.print(f"[red]✗[/red] {escape(message)}")

    def show_warning(self, message: str) -> None:
        """Show warning message."""
        self.console.print(f"[yellow]![/yellow] {escape(message)}")

    def show_info(self, message: str) -> None:
        """Show info message."""
        self.console.print(f"[blue]i[/blue] {escape(message)}")

    def show_line(self, message: str = "") -> None:
        """Show a plain line."""
        self.console.print(escape(message))

    @contextmanager
    def progress(self, description: str) -> Iterator[None]:
        """Show a spinner while the block runs.

        Args:
            description: Text shown next to the spinner.
        """
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=self.console,
            transient=True,
        ) as progress:
            progress.add_task(description, total=None)
            yield

"""CLI commands using Typer."""

from __future__ import annotations

import logging
from typing import Annotated

import click
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from typer.core import TyperCommand, TyperGroup

from agent_config import __version__
from agent_config.config import Settings
from agent_config.context import create_context
from agent_config.init import EXIT_FAILURE, run_init

console = Console()
err_console = Console(stderr=True)


class AgentConfigGroup(TyperGroup):
    """Command group that treats unknown commands and options as exit status 1."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.NoSuchOption as e:
            _reject_unknown(ctx, e.option_name)
            raise

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError:
            _reject_unknown(ctx, args[0])
            raise


class AgentConfigCommand(TyperCommand):
    """Command that treats unexpected arguments and options as exit status 1."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            if isinstance(e, click.NoSuchOption):
                name = e.option_name
            else:
                name = args[0] if args else ""
            _reject_unknown(ctx, name)
            raise


def _reject_unknown(ctx: click.Context, name: str) -> None:
    """Print an unknown-command message and usage, then exit with status 1."""
    err_console.print(f"[red]✗[/red] Unknown command: {name}", highlight=False)
    typer.echo(ctx.get_help())
    ctx.exit(EXIT_FAILURE)


app = typer.Typer(
    name="agent-config",
    help="Install AI coding agent configuration, skills and commands",
    cls=AgentConfigGroup,
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def configure_logging(debug: bool) -> None:
    """Route log records through rich; DEBUG when debugging, else WARNING."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"agent-config v{__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
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
) -> None:
    """Install AI coding agent configuration, skills and commands.

    Runs the interactive setup when no command is given.
    """
    if ctx.invoked_subcommand is None:
        init()


@app.command(cls=AgentConfigCommand)
def init() -> None:
    """Initialize agent configuration (default)."""
    try:
        settings = Settings.from_env()
    except ValidationError as e:
        err_console.print(f"[red]✗[/red] Invalid AGENT_CONFIG_* setting: {e.errors()[0]['msg']}")
        raise typer.Exit(EXIT_FAILURE) from e
    configure_logging(settings.debug)
    exit_code = run_init(create_context(settings=settings, console=console))
    if exit_code:
        raise typer.Exit(exit_code)


if __name__ == "__main__":
    app()

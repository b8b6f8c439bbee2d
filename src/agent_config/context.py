"""Application context for dependency injection.

Separates object creation from object use: commands receive an AppContext
and never construct their collaborators. Dependencies are typed with the
Protocols so test doubles can be injected without inheritance.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console

from agent_config.config import Settings
from agent_config.protocols import (
    ConfigInstaller,
    FileSystem,
    Prompter,
    Reporter,
    TemplateSource,
)


def _default_filesystem() -> FileSystem:
    """Create the default filesystem implementation."""
    from agent_config.filesystem import LocalFileSystem

    return LocalFileSystem()


@dataclass
class AppContext:
    """Container for application dependencies.

    `home` and `cwd` are only set when overriding where installs resolve;
    None means the real home and working directories.
    """

    fetcher: TemplateSource
    writer: ConfigInstaller
    prompter: Prompter
    reporter: Reporter
    filesystem: FileSystem = field(default_factory=_default_filesystem)
    home: Path | None = None
    cwd: Path | None = None


def create_context(
    settings: Settings | None = None,
    home: Path | None = None,
    cwd: Path | None = None,
    console: Console | None = None,
) -> AppContext:
    """Factory for application dependencies.

    Creates all services with proper wiring. Use this in production code.
    For tests, construct AppContext directly with test doubles.

    Args:
        settings: Runtime settings. Defaults to Settings.from_env().
        home: Override home directory (for testing).
        cwd: Override working directory (for testing).
        console: Console shared by the reporter and prompter.

    Returns:
        Configured AppContext with all dependencies.
    """
    from agent_config.fetcher import TemplateFetcher
    from agent_config.filesystem import LocalFileSystem
    from agent_config.prompts import RichPrompter
    from agent_config.reporter import ConsoleReporter
    from agent_config.writer import ConfigWriter

    settings = settings or Settings.from_env()
    console = console or Console()

    reporter = ConsoleReporter(console)
    filesystem = LocalFileSystem()
    fetcher = TemplateFetcher.create(settings.base_url, settings.timeout, reporter=reporter)
    writer = ConfigWriter.create(reporter=reporter, filesystem=filesystem, home=home, cwd=cwd)

    return AppContext(
        fetcher=fetcher,
        writer=writer,
        prompter=RichPrompter(console),
        reporter=reporter,
        filesystem=filesystem,
        home=home,
        cwd=cwd,
    )

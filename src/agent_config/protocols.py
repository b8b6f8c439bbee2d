"""Protocol definitions for core abstractions.

Components depend on these interfaces rather than on concrete classes, so
tests can hand in doubles without inheritance. Concrete implementations
satisfy them structurally.
"""

from __future__ import annotations

from collections.abc import Sequence
from contextlib import AbstractContextManager
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from agent_config.types import FetchedContent, Option, WriteReport

if TYPE_CHECKING:
    from agent_config.agents import AgentProfile
    from agent_config.models import Selection


@runtime_checkable
class TemplateSource(Protocol):
    """Protocol for retrieving template content."""

    def fetch(self, agent_id: str) -> FetchedContent:
        """Fetch the base config for an agent and the skill/command catalog.

        Args:
            agent_id: Agent whose base configuration to fetch.

        Returns:
            Possibly partial FetchedContent.

        Raises:
            FetchError: If the base configuration cannot be fetched.
        """
        ...

    def probe_reachability(self) -> bool:
        """Return True if the template repository can be reached. Never raises."""
        ...


@runtime_checkable
class ConfigInstaller(Protocol):
    """Protocol for writing configurations to disk."""

    def write(self, selection: Selection, content: FetchedContent) -> WriteReport:
        """Write the base config and selected skills/commands.

        Args:
            selection: The user's choices.
            content: Fetched template content.

        Returns:
            Report of what was written and skipped.
        """
        ...

    def backup(
        self, target: str, profile: AgentProfile, now: datetime | None = None
    ) -> Path | None:
        """Copy an existing install root aside.

        Args:
            target: Install target (project or global).
            profile: Agent profile naming the install root.
            now: Timestamp for the backup name.

        Returns:
            Backup path, or None if there was nothing to back up.
        """
        ...

    def install_root(self, target: str, profile: AgentProfile) -> Path:
        """Resolve the install root for a target and agent."""
        ...


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for the filesystem operations the writer performs."""

    def exists(self, path: Path) -> bool:
        """Check if a path exists."""
        ...

    def ensure_dir(self, path: Path) -> None:
        """Create a directory and its parents if missing."""
        ...

    def write_text(self, path: Path, content: str) -> None:
        """Write a text file, replacing existing content."""
        ...

    def copytree(self, src: Path, dst: Path) -> None:
        """Recursively copy a directory."""
        ...


@runtime_checkable
class Reporter(Protocol):
    """Protocol for user-facing progress output."""

    def show_intro(self, title: str) -> None: ...

    def show_outro(self, message: str) -> None: ...

    def show_success(self, message: str) -> None: ...

    def show_error(self, message: str) -> None: ...

    def show_warning(self, message: str) -> None: ...

    def show_info(self, message: str) -> None: ...

    def show_line(self, message: str = "") -> None: ...

    def progress(self, description: str) -> AbstractContextManager[None]:
        """Context manager showing activity while the block runs."""
        ...


@runtime_checkable
class Prompter(Protocol):
    """Protocol for interactive questions.

    Every method raises PromptCancelled when the user aborts.
    """

    def select(
        self, message: str, options: Sequence[Option], default: str | None = None
    ) -> str:
        """Choose one option; returns its value."""
        ...

    def multiselect(
        self, message: str, options: Sequence[Option], defaults: Sequence[str] = ()
    ) -> list[str]:
        """Choose any number of options; returns their values in option order."""
        ...

    def confirm(self, message: str, default: bool = False) -> bool:
        """Ask a yes/no question."""
        ...

    def text(self, message: str, default: str = "") -> str:
        """Ask for free text."""
        ...

"""Writing agent configurations to disk."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from agent_config.agents import AgentProfile, get_agent_profile
from agent_config.filesystem import LocalFileSystem
from agent_config.paths import (
    backup_path,
    base_config_path,
    command_path,
    resolve_install_root,
    skill_path,
)
from agent_config.protocols import FileSystem
from agent_config.transform import build_base_config
from agent_config.types import FetchedContent, WriteReport

if TYPE_CHECKING:
    from agent_config.models import Selection
    from agent_config.protocols import Reporter

logger = logging.getLogger(__name__)


class ConfigWriter:
    """Writes the base config, skills and commands for a selection.

    Follows Separate Use from Creation: constructor requires all dependencies.
    Use factory method `create()` for production instantiation with defaults.
    """

    def __init__(
        self,
        filesystem: FileSystem,
        reporter: Reporter | None = None,
        home: Path | None = None,
        cwd: Path | None = None,
    ) -> None:
        """Initialize writer with required dependencies.

        Args:
            filesystem: Filesystem abstraction (required).
            reporter: Receives one line per file created.
            home: Home directory override for global installs.
            cwd: Working directory override for project installs.
        """
        self.fs = filesystem
        self.reporter = reporter
        self.home = home
        self.cwd = cwd

    @classmethod
    def create(
        cls,
        reporter: Reporter | None = None,
        filesystem: FileSystem | None = None,
        home: Path | None = None,
        cwd: Path | None = None,
    ) -> ConfigWriter:
        """Factory method for production instantiation.

        Args:
            reporter: Optional progress reporter.
            filesystem: Optional filesystem abstraction (created if not provided).
            home: Optional home directory override.
            cwd: Optional working directory override.

        Returns:
            Configured ConfigWriter instance.
        """
        return cls(
            filesystem=filesystem or LocalFileSystem(),
            reporter=reporter,
            home=home,
            cwd=cwd,
        )

    def install_root(self, target: str, profile: AgentProfile) -> Path:
        """Resolve the install root for a target and agent."""
        return resolve_install_root(target, profile.config_dir_name, home=self.home, cwd=self.cwd)

    def write(self, selection: Selection, content: FetchedContent) -> WriteReport:
        """Write a selection's configuration under its install root.

        The base config is always written, overwriting any existing file.
        Selected skills and commands without fetched content are skipped.

        Args:
            selection: The user's choices.
            content: Fetched template content.

        Returns:
            WriteReport listing what was written and skipped.

        Raises:
            OSError: If a directory or file cannot be written.
        """
        profile = get_agent_profile(selection.agent)
        root = self.install_root(selection.target, profile)
        self.fs.ensure_dir(root)

        config_path = base_config_path(root, profile.config_file_name)
        self.fs.write_text(config_path, build_base_config(content.base_config, selection))
        logger.debug("Wrote %s", config_path)
        self._info(f"Created {profile.config_file_name}")

        report = WriteReport(install_root=root, base_config_path=config_path)

        for skill_id in selection.skills:
            text = content.skills.get(skill_id)
            if text is None:
                report.skipped_skills.append(skill_id)
                continue
            path = skill_path(root, skill_id, profile.skill_subdir)
            self._write_file(path, text)
            report.skills.append(skill_id)
            self._info(f"Created skill: {skill_id}")

        for command_id in selection.commands:
            text = content.commands.get(command_id)
            if text is None:
                report.skipped_commands.append(command_id)
                continue
            path = command_path(root, command_id, profile.command_subdir)
            self._write_file(path, text)
            report.commands.append(command_id)
            self._info(f"Created command: {command_id}")

        if report.skipped:
            logger.debug("Skipped items without content: %s", ", ".join(report.skipped))

        if self.reporter is not None:
            self.reporter.show_success(f"Configuration installed to: {root}")
        return report

    def backup(
        self, target: str, profile: AgentProfile, now: datetime | None = None
    ) -> Path | None:
        """Copy an existing install root to a timestamped sibling.

        Args:
            target: Install target (project or global).
            profile: Agent profile naming the install root.
            now: Timestamp for the backup name. Defaults to the current time.

        Returns:
            Path of the backup, or None if the install root does not exist.

        Raises:
            OSError: If the copy fails.
        """
        root = self.install_root(target, profile)
        if not self.fs.exists(root):
            return None

        destination = backup_path(root, now)
        self.fs.copytree(root, destination)
        logger.debug("Backed up %s to %s", root, destination)
        return destination

    def _write_file(self, path: Path, text: str) -> None:
        self.fs.ensure_dir(path.parent)
        self.fs.write_text(path, text)
        logger.debug("Wrote %s", path)

    def _info(self, message: str) -> None:
        if self.reporter is not None:
            self.reporter.show_info(message)

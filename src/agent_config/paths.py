"""Install path resolution.

All functions are pure apart from reading the home and working directory
when they are not passed in.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from pathlib import Path

SKILL_FILE = "SKILL.md"
COMMAND_EXTENSION = ".md"


def resolve_install_root(
    target: str,
    config_dir_name: str,
    home: Path | None = None,
    cwd: Path | None = None,
) -> Path:
    """Get the directory a configuration is installed under.

    Args:
        target: "global" for the home directory, "project" for the working directory.
        config_dir_name: Agent configuration directory name (e.g. .claude).
        home: Home directory override. Defaults to Path.home().
        cwd: Working directory override. Defaults to Path.cwd().

    Returns:
        {home}/{config_dir_name} or the absolute {cwd}/{config_dir_name}.

    Raises:
        ValueError: If target is not "global" or "project".
    """
    if target == "global":
        return (home or Path.home()) / config_dir_name
    if target == "project":
        return ((cwd or Path.cwd()) / config_dir_name).absolute()
    raise ValueError(f"Unknown install target: {target}")


def skill_path(root: Path, skill_id: str, skill_subdir: str) -> Path:
    """Path of a skill's SKILL.md: {root}/{skill_subdir}/{skill_id}/SKILL.md."""
    return root / skill_subdir / skill_id / SKILL_FILE


def command_path(root: Path, command_id: str, command_subdir: str) -> Path:
    """Path of a command file: {root}/{command_subdir}/{command_id}.md."""
    return root / command_subdir / f"{command_id}{COMMAND_EXTENSION}"


def base_config_path(root: Path, config_file_name: str) -> Path:
    """Path of the base configuration file: {root}/{config_file_name}."""
    return root / config_file_name


def backup_timestamp(now: datetime | None = None) -> str:
    """Format a filename-safe UTC timestamp.

    Produces ISO-8601 with milliseconds and a trailing Z, with ':' and '.'
    replaced by '-', e.g. 2026-10-19T05-56-01-123Z.

    Args:
        now: Moment to format. Naive values are taken as UTC. Defaults to now.

    Returns:
        The timestamp string.
    """
    moment = now or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    iso = f"{moment:%Y-%m-%dT%H:%M:%S}.{moment.microsecond // 1000:03d}Z"
    return re.sub(r"[:.]", "-", iso)


def backup_path(root: Path, now: datetime | None = None) -> Path:
    """Sibling path a backup of root is copied to: {root}-backup-{timestamp}."""
    return root.with_name(f"{root.name}-backup-{backup_timestamp(now)}")

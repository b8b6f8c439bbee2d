"""Shared data types for agent-config."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, NamedTuple

__all__ = [
    "AgentId",
    "CommandId",
    "CommitStyle",
    "ConfigApproach",
    "FetchedContent",
    "InstallTarget",
    "Option",
    "PresetId",
    "SkillId",
    "WriteReport",
]

AgentId = Literal["claude-code", "opencode", "kiro"]

InstallTarget = Literal["project", "global"]

ConfigApproach = Literal["preset", "custom"]

CommitStyle = Literal["conventional", "semantic", "custom"]

PresetId = Literal["fullstack-react", "backend-api", "frontend-only", "minimal"]

SkillId = Literal[
    "typescript",
    "react",
    "software-engineering",
    "writing",
    "reviewing-code",
]

CommandId = Literal[
    "create-feature",
    "investigate",
    "investigate-batch",
    "open-pr",
    "review-staged",
    "trim",
    "ultra-think",
    "create-architecture-documentation",
    "generate-tests",
]


class Option(NamedTuple):
    """A selectable value with its display label and hint."""

    value: str
    label: str
    hint: str = ""


@dataclass
class FetchedContent:
    """Template content retrieved from the remote repository.

    Attributes:
        base_config: Raw base configuration text for the agent.
        skills: Skill id to SKILL.md text. Missing ids failed to fetch.
        commands: Command id to command text. Missing ids failed to fetch.
    """

    base_config: str
    skills: dict[str, str] = field(default_factory=dict)
    commands: dict[str, str] = field(default_factory=dict)


@dataclass
class WriteReport:
    """Result of writing a configuration to disk.

    Attributes:
        install_root: Directory everything was written under.
        base_config_path: Path of the base configuration file.
        skills: Skill ids written, in selection order.
        commands: Command ids written, in selection order.
        skipped_skills: Selected skills with no fetched content.
        skipped_commands: Selected commands with no fetched content.
    """

    install_root: Path
    base_config_path: Path
    skills: list[str] = field(default_factory=list)
    commands: list[str] = field(default_factory=list)
    skipped_skills: list[str] = field(default_factory=list)
    skipped_commands: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.base_config_path.parent != self.install_root:
            raise ValueError("base_config_path must be directly inside install_root")
        if set(self.skills) & set(self.skipped_skills):
            raise ValueError("a skill cannot be both written and skipped")
        if set(self.commands) & set(self.skipped_commands):
            raise ValueError("a command cannot be both written and skipped")

    @property
    def skipped(self) -> list[str]:
        """All skipped ids, skills first."""
        return [*self.skipped_skills, *self.skipped_commands]

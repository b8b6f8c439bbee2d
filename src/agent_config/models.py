"""Selection and preset models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from agent_config.types import (
    AgentId,
    CommandId,
    CommitStyle,
    ConfigApproach,
    InstallTarget,
    PresetId,
    SkillId,
)


def _unique(values: list[str]) -> list[str]:
    """Drop repeated entries, keeping the first occurrence."""
    return list(dict.fromkeys(values))


class Preset(BaseModel):
    """A named bundle of skills, commands and a commit style."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    skills: tuple[SkillId, ...]
    commands: tuple[CommandId, ...]
    commit_style: CommitStyle = "conventional"


class Selection(BaseModel):
    """The user's completed choices for one install."""

    model_config = ConfigDict(populate_by_name=True)

    agent: AgentId
    target: InstallTarget
    approach: ConfigApproach = "custom"
    preset: PresetId | None = None
    skills: list[SkillId] = Field(default_factory=list)
    commands: list[CommandId] = Field(default_factory=list)
    commit_style: CommitStyle = Field(default="conventional", alias="commitStyle")
    custom_git_rules: str | None = Field(default=None, alias="customGitRules")

    @field_validator("skills", "commands")
    @classmethod
    def _dedupe(cls, values: list[str]) -> list[str]:
        return _unique(values)

    @field_validator("custom_git_rules")
    @classmethod
    def _blank_rules_to_none(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value

"""Agent profiles: per-agent file and directory naming.

Every agent keeps its assets under one configuration directory, but the
agents disagree on the base config file name and on whether the skill and
command directories are singular or plural. All of that lives in the
AGENT_PROFILES table; callers resolve a profile once and pass its fields
to the path functions instead of branching on the agent id.
"""

from __future__ import annotations

from dataclasses import dataclass

from agent_config.types import AgentId

__all__ = [
    "AGENT_PROFILES",
    "AgentProfile",
    "get_agent_profile",
    "list_agent_profiles",
]


@dataclass(frozen=True)
class AgentProfile:
    """Naming conventions for one agent.

    Attributes:
        id: Agent identifier.
        config_file_name: Base configuration file written at the install root.
        display_name: Human-readable agent name.
        commit_label: Name substituted into the commit-message instructions.
        config_dir_name: Directory holding all of the agent's assets.
        skill_subdir: Skills directory under the install root.
        command_subdir: Commands directory under the install root.
        hint: One-line description shown when choosing an agent.
    """

    id: AgentId
    config_file_name: str
    display_name: str
    commit_label: str
    config_dir_name: str
    skill_subdir: str
    command_subdir: str
    hint: str = ""


AGENT_PROFILES: dict[str, AgentProfile] = {
    "claude-code": AgentProfile(
        id="claude-code",
        config_file_name="CLAUDE.md",
        display_name="Claude Code",
        commit_label="Claude Code",
        config_dir_name=".claude",
        skill_subdir="skills",
        command_subdir="commands",
        hint="Anthropic Claude for coding",
    ),
    "opencode": AgentProfile(
        id="opencode",
        config_file_name="AGENTS.md",
        display_name="OpenCode",
        commit_label="OpenCode",
        config_dir_name=".opencode",
        skill_subdir="skill",
        command_subdir="command",
        hint="Open source AI coding agent",
    ),
    "kiro": AgentProfile(
        id="kiro",
        config_file_name="KIRO.md",
        display_name="Kiro",
        commit_label="Kiro",
        config_dir_name=".kiro",
        skill_subdir="skills",
        command_subdir="commands",
        hint="Spec-driven AI IDE by AWS",
    ),
}


def get_agent_profile(agent_id: str) -> AgentProfile:
    """Get the naming profile for an agent.

    Args:
        agent_id: Agent identifier (claude-code, opencode, kiro).

    Returns:
        The agent's profile.

    Raises:
        ValueError: If the agent is not known.
    """
    if agent_id not in AGENT_PROFILES:
        raise ValueError(f"Unknown agent: {agent_id}. Supported: {list(AGENT_PROFILES.keys())}")
    return AGENT_PROFILES[agent_id]


def list_agent_profiles() -> list[AgentProfile]:
    """All agent profiles, in display order."""
    return list(AGENT_PROFILES.values())

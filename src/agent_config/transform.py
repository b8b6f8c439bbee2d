"""Per-agent rewriting of the base configuration text.

These are targeted substitutions on known sentences of the upstream
template, not general templating. All functions are pure.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from agent_config.agents import AGENT_PROFILES, get_agent_profile

if TYPE_CHECKING:
    from agent_config.models import Selection

CONVENTIONAL_PHRASE = "Use conventional commits"
SEMANTIC_PHRASE = "Use semantic commits"
CUSTOM_RULES_HEADING = "## Custom Git Rules"

_COMMIT_LABEL_PATTERN = re.compile(
    r'Do not include "(?:'
    + "|".join(re.escape(profile.commit_label) for profile in AGENT_PROFILES.values())
    + r')" in commit messages'
)


def customize_base_config(base_config: str, agent_id: str, commit_style: str) -> str:
    """Adapt the base configuration text to an agent and commit style.

    Rewrites the first `Do not include "<agent>" in commit messages`
    sentence to name the target agent. For the semantic style, the first
    "Use conventional commits" becomes "Use semantic commits". The
    conventional and custom styles leave the wording alone.

    Args:
        base_config: Raw base configuration text.
        agent_id: Target agent identifier.
        commit_style: One of conventional, semantic, custom.

    Returns:
        The customized text.

    Raises:
        ValueError: If the agent is not known.
    """
    profile = get_agent_profile(agent_id)
    replacement = f'Do not include "{profile.commit_label}" in commit messages'
    customized = _COMMIT_LABEL_PATTERN.sub(lambda _: replacement, base_config, count=1)

    if commit_style == "semantic":
        customized = customized.replace(CONVENTIONAL_PHRASE, SEMANTIC_PHRASE, 1)

    return customized


def append_custom_git_rules(base_config: str, rules: str | None) -> str:
    """Append a Custom Git Rules section when rules are given."""
    if not rules:
        return base_config
    return f"{base_config}\n\n{CUSTOM_RULES_HEADING}\n{rules}\n"


def build_base_config(base_config: str, selection: Selection) -> str:
    """Produce the final base configuration text for a selection."""
    customized = customize_base_config(base_config, selection.agent, selection.commit_style)
    return append_custom_git_rules(customized, selection.custom_git_rules)

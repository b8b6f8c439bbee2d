"""Catalog of installable skills, commands and presets.

The remote template repository is small and flat, so the full catalog is
known up front and fetched in one pass regardless of what the user picks.
"""

from __future__ import annotations

from agent_config.models import Preset
from agent_config.types import Option

SKILLS: tuple[Option, ...] = (
    Option("typescript", "TypeScript", "TypeScript/JavaScript best practices"),
    Option("react", "React", "React/Next.js patterns"),
    Option("software-engineering", "Software Engineering", "Core engineering principles"),
    Option("writing", "Writing", "Technical writing standards"),
    Option("reviewing-code", "Code Review", "Code review guidelines"),
)

COMMANDS: tuple[Option, ...] = (
    Option("create-feature", "create-feature", "Scaffold new features"),
    Option("investigate", "investigate", "Deep dive into bugs"),
    Option("investigate-batch", "investigate-batch", "Quick investigation"),
    Option("open-pr", "open-pr", "Create pull requests"),
    Option("review-staged", "review-staged", "Review staged changes"),
    Option("trim", "trim", "Concise response mode"),
    Option("ultra-think", "ultra-think", "Deep strategic analysis"),
    Option(
        "create-architecture-documentation",
        "create-architecture-docs",
        "Generate architecture docs",
    ),
    Option("generate-tests", "generate-tests", "Generate comprehensive tests"),
)

SKILL_IDS: tuple[str, ...] = tuple(option.value for option in SKILLS)
COMMAND_IDS: tuple[str, ...] = tuple(option.value for option in COMMANDS)

PRESETS: dict[str, Preset] = {
    "fullstack-react": Preset(
        name="Full-Stack React",
        description="Complete setup for React/Next.js full-stack development",
        skills=("typescript", "react", "software-engineering", "reviewing-code"),
        commands=(
            "create-feature",
            "investigate",
            "review-staged",
            "open-pr",
            "ultra-think",
            "generate-tests",
        ),
    ),
    "backend-api": Preset(
        name="Backend API",
        description="Optimized for Node.js backend and API development",
        skills=("typescript", "software-engineering", "reviewing-code"),
        commands=(
            "create-feature",
            "investigate",
            "review-staged",
            "trim",
            "create-architecture-documentation",
            "generate-tests",
        ),
    ),
    "frontend-only": Preset(
        name="Frontend Only",
        description="Focused on frontend development with React",
        skills=("typescript", "react", "writing"),
        commands=("create-feature", "review-staged", "open-pr", "generate-tests"),
    ),
    "minimal": Preset(
        name="Minimal",
        description="Bare essentials for any TypeScript project",
        skills=("typescript", "software-engineering"),
        commands=("investigate", "investigate-batch"),
    ),
}


def get_preset(preset_id: str) -> Preset | None:
    """Look up a preset by id.

    Args:
        preset_id: Preset key (fullstack-react, backend-api, frontend-only, minimal).

    Returns:
        The preset, or None if the id is unknown.
    """
    return PRESETS.get(preset_id)


def list_presets() -> list[tuple[str, Preset]]:
    """All presets with their ids, in display order."""
    return list(PRESETS.items())

"""Shared test fixtures."""

from __future__ import annotations

import io
from collections.abc import Sequence
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from agent_config.catalog import COMMAND_IDS, SKILL_IDS
from agent_config.prompts import PromptCancelled
from agent_config.types import FetchedContent, Option

CANCEL = object()


@pytest.fixture
def temp_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Override home directory for testing."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    return home


@pytest.fixture
def temp_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty project directory."""
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    return Path.cwd()


@pytest.fixture
def console_buffer() -> io.StringIO:
    """Buffer capturing console output."""
    return io.StringIO()


@pytest.fixture
def console(console_buffer: io.StringIO) -> Console:
    """Non-interactive console writing to a buffer."""
    return Console(file=console_buffer, force_terminal=False, width=200)


@pytest.fixture
def mock_reporter() -> MagicMock:
    """Reporter double whose progress() works as a context manager."""
    reporter = MagicMock()
    reporter.progress.return_value.__enter__.return_value = None
    reporter.progress.return_value.__exit__.return_value = False
    return reporter


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Filesystem double where nothing exists yet."""
    fs = MagicMock()
    fs.exists.return_value = False
    return fs


# ============================================================================
# Sample Content Fixtures
# ============================================================================


@pytest.fixture
def sample_base_config() -> str:
    """Base configuration as published for Claude Code."""
    return """# Agent Guidelines

## Git

- Use conventional commits for every change.
- Do not include "Claude Code" in commit messages.
- Keep commits small.
"""


@pytest.fixture
def full_content(sample_base_config: str) -> FetchedContent:
    """Fetched content with every skill and command present."""
    return FetchedContent(
        base_config=sample_base_config,
        skills={skill_id: f"# {skill_id} skill\n" for skill_id in SKILL_IDS},
        commands={command_id: f"# {command_id} command\n" for command_id in COMMAND_IDS},
    )


# ============================================================================
# Prompt Fixtures
# ============================================================================


class ScriptedPrompter:
    """Prompter answering from a fixed script.

    Each call consumes the next answer. The CANCEL sentinel raises
    PromptCancelled, as a real prompter does on Ctrl-C.
    """

    CANCEL = CANCEL

    def __init__(self, answers: Sequence[Any]) -> None:
        self.answers = list(answers)
        self.calls: list[tuple[str, str, Any]] = []

    def _next(self, kind: str, message: str, extra: Any = None) -> Any:
        self.calls.append((kind, message, extra))
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {message}")
        answer = self.answers.pop(0)
        if answer is CANCEL:
            raise PromptCancelled
        return answer

    def select(
        self, message: str, options: Sequence[Option], default: str | None = None
    ) -> str:
        answer = self._next("select", message, default)
        assert answer in [option.value for option in options]
        return answer

    def multiselect(
        self, message: str, options: Sequence[Option], defaults: Sequence[str] = ()
    ) -> list[str]:
        return list(self._next("multiselect", message, list(defaults)))

    def confirm(self, message: str, default: bool = False) -> bool:
        return self._next("confirm", message, default)

    def text(self, message: str, default: str = "") -> str:
        return self._next("text", message, default)


@pytest.fixture
def scripted_prompter() -> type[ScriptedPrompter]:
    """The ScriptedPrompter class, for building prompters per test."""
    return ScriptedPrompter

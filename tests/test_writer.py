"""Tests for the configuration writer."""

from __future__ import annotations

import filecmp
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from agent_config.agents import get_agent_profile
from agent_config.models import Selection
from agent_config.types import FetchedContent, WriteReport
from agent_config.writer import ConfigWriter


def _files_under(root: Path) -> set[str]:
    return {p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file()}


@pytest.fixture
def writer(tmp_path: Path) -> ConfigWriter:
    """Writer resolving installs under temporary home and project dirs."""
    (tmp_path / "home").mkdir()
    (tmp_path / "project").mkdir()
    return ConfigWriter.create(home=tmp_path / "home", cwd=tmp_path / "project")


class TestWrite:
    """Tests for ConfigWriter.write."""

    def test_claude_code_project_install(
        self, writer: ConfigWriter, full_content: FetchedContent, tmp_path: Path
    ) -> None:
        """Only the selected items are written, with Claude Code naming."""
        selection = Selection(
            agent="claude-code",
            target="project",
            skills=["typescript"],
            commands=["investigate"],
            commit_style="conventional",
        )

        report = writer.write(selection, full_content)

        root = tmp_path / "project" / ".claude"
        assert report.install_root == root
        assert _files_under(root) == {
            "CLAUDE.md",
            "skills/typescript/SKILL.md",
            "commands/investigate.md",
        }
        assert 'Do not include "Claude Code"' in (root / "CLAUDE.md").read_text()
        assert (root / "skills" / "typescript" / "SKILL.md").read_text() == "# typescript skill\n"
        assert (root / "commands" / "investigate.md").read_text() == "# investigate command\n"

    def test_opencode_global_install_uses_singular_dirs(
        self, writer: ConfigWriter, full_content: FetchedContent, tmp_path: Path
    ) -> None:
        """OpenCode writes AGENTS.md with singular subdirectories in the home dir."""
        selection = Selection(
            agent="opencode",
            target="global",
            skills=["react"],
            commands=["open-pr"],
            commit_style="semantic",
        )

        writer.write(selection, full_content)

        root = tmp_path / "home" / ".opencode"
        assert _files_under(root) == {
            "AGENTS.md",
            "skill/react/SKILL.md",
            "command/open-pr.md",
        }
        base = (root / "AGENTS.md").read_text()
        assert 'Do not include "OpenCode" in commit messages' in base
        assert "Use semantic commits" in base

    def test_missing_skill_skipped(
        self, writer: ConfigWriter, sample_base_config: str, tmp_path: Path
    ) -> None:
        """A selected skill without content is skipped, not fatal."""
        content = FetchedContent(
            base_config=sample_base_config,
            skills={"typescript": "ts"},
            commands={},
        )
        selection = Selection(
            agent="claude-code",
            target="project",
            skills=["typescript", "react"],
            commands=["trim"],
        )

        report = writer.write(selection, content)

        root = tmp_path / "project" / ".claude"
        assert not (root / "skills" / "react").exists()
        assert not (root / "commands").exists()
        assert report.skills == ["typescript"]
        assert report.skipped_skills == ["react"]
        assert report.skipped_commands == ["trim"]

    def test_custom_git_rules_appended(
        self, writer: ConfigWriter, sample_base_config: str, tmp_path: Path
    ) -> None:
        """Custom rules end up in a delimited section of the base config."""
        selection = Selection(
            agent="kiro",
            target="project",
            commit_style="custom",
            custom_git_rules="Reference the Jira ticket.",
        )

        writer.write(selection, FetchedContent(base_config=sample_base_config))

        base = (tmp_path / "project" / ".kiro" / "KIRO.md").read_text()
        assert base.endswith("\n\n## Custom Git Rules\nReference the Jira ticket.\n")
        assert 'Do not include "Kiro" in commit messages' in base

    def test_overwrites_existing_base_config(
        self, writer: ConfigWriter, sample_base_config: str, tmp_path: Path
    ) -> None:
        """An existing base config file is replaced."""
        root = tmp_path / "project" / ".claude"
        root.mkdir()
        (root / "CLAUDE.md").write_text("stale")

        writer.write(
            Selection(agent="claude-code", target="project"),
            FetchedContent(base_config=sample_base_config),
        )

        assert (root / "CLAUDE.md").read_text() == sample_base_config

    def test_reports_progress(
        self, full_content: FetchedContent, tmp_path: Path, mock_reporter: MagicMock
    ) -> None:
        """Each created file is reported."""
        writer = ConfigWriter.create(reporter=mock_reporter, cwd=tmp_path)
        selection = Selection(
            agent="claude-code", target="project", skills=["react"], commands=["trim"]
        )

        writer.write(selection, full_content)

        infos = [c.args[0] for c in mock_reporter.show_info.call_args_list]
        assert infos == ["Created CLAUDE.md", "Created skill: react", "Created command: trim"]
        mock_reporter.show_success.assert_called_once_with(
            f"Configuration installed to: {tmp_path / '.claude'}"
        )

    def test_uses_filesystem_abstraction(
        self, mock_filesystem: MagicMock, sample_base_config: str
    ) -> None:
        """All I/O goes through the injected filesystem."""
        writer = ConfigWriter(filesystem=mock_filesystem, cwd=Path("/work"))
        content = FetchedContent(base_config=sample_base_config, commands={"trim": "t"})

        writer.write(
            Selection(agent="claude-code", target="project", commands=["trim"]), content
        )

        mock_filesystem.ensure_dir.assert_any_call(Path("/work/.claude"))
        mock_filesystem.ensure_dir.assert_any_call(Path("/work/.claude/commands"))
        written = [c.args[0] for c in mock_filesystem.write_text.call_args_list]
        assert written == [Path("/work/.claude/CLAUDE.md"), Path("/work/.claude/commands/trim.md")]

    def test_filesystem_error_propagates(
        self, mock_filesystem: MagicMock, sample_base_config: str
    ) -> None:
        """Write failures are not swallowed."""
        mock_filesystem.write_text.side_effect = PermissionError("read-only")
        writer = ConfigWriter(filesystem=mock_filesystem, cwd=Path("/work"))

        with pytest.raises(PermissionError):
            writer.write(
                Selection(agent="claude-code", target="project"),
                FetchedContent(base_config=sample_base_config),
            )


class TestBackup:
    """Tests for ConfigWriter.backup."""

    def test_no_install_root(self, writer: ConfigWriter, tmp_path: Path) -> None:
        """Nothing to back up returns None and writes nothing."""
        before = set((tmp_path / "project").iterdir())

        result = writer.backup("project", get_agent_profile("claude-code"))

        assert result is None
        assert set((tmp_path / "project").iterdir()) == before

    def test_copies_existing_root(self, writer: ConfigWriter, tmp_path: Path) -> None:
        """An existing root is copied byte-for-byte to a timestamped sibling."""
        root = tmp_path / "home" / ".kiro"
        (root / "skills" / "react").mkdir(parents=True)
        (root / "KIRO.md").write_text("# Kiro\n")
        (root / "skills" / "react" / "SKILL.md").write_bytes(b"\x00binary\xffok")
        now = datetime(2026, 10, 19, 5, 56, 1, 123000, tzinfo=timezone.utc)

        result = writer.backup("global", get_agent_profile("kiro"), now=now)

        assert result == tmp_path / "home" / ".kiro-backup-2026-10-19T05-56-01-123Z"
        assert result != root
        comparison = filecmp.dircmp(root, result)
        assert not comparison.left_only and not comparison.right_only
        assert _files_under(result) == _files_under(root)
        for name in _files_under(root):
            assert (result / name).read_bytes() == (root / name).read_bytes()

    def test_original_left_in_place(self, writer: ConfigWriter, tmp_path: Path) -> None:
        """Backing up does not move the original."""
        root = tmp_path / "project" / ".opencode"
        root.mkdir()
        (root / "AGENTS.md").write_text("x")

        writer.backup("project", get_agent_profile("opencode"))

        assert (root / "AGENTS.md").read_text() == "x"


class TestWriteReport:
    """Tests for WriteReport invariants."""

    def test_base_config_must_be_in_root(self, tmp_path: Path) -> None:
        """base_config_path outside the root is rejected."""
        with pytest.raises(ValueError, match="install_root"):
            WriteReport(install_root=tmp_path / "a", base_config_path=tmp_path / "b" / "X.md")

    def test_item_cannot_be_written_and_skipped(self, tmp_path: Path) -> None:
        """An id appears in at most one of written/skipped."""
        with pytest.raises(ValueError, match="both written and skipped"):
            WriteReport(
                install_root=tmp_path,
                base_config_path=tmp_path / "CLAUDE.md",
                skills=["react"],
                skipped_skills=["react"],
            )

    def test_skipped_combines_lists(self, tmp_path: Path) -> None:
        """skipped lists skills before commands."""
        report = WriteReport(
            install_root=tmp_path,
            base_config_path=tmp_path / "CLAUDE.md",
            skipped_skills=["react"],
            skipped_commands=["trim"],
        )
        assert report.skipped == ["react", "trim"]

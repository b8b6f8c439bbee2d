"""The interactive install command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from agent_config.agents import AgentProfile, get_agent_profile
from agent_config.prompts import Cancelled, prompt_init_flow

if TYPE_CHECKING:
    from pathlib import Path

    from agent_config.context import AppContext
    from agent_config.models import Selection
    from agent_config.types import WriteReport

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1

UNREACHABLE_MESSAGE = (
    "Cannot reach GitHub repository. Please check your internet connection."
)


def run_init(ctx: AppContext) -> int:
    """Run the interactive install from connectivity check to summary.

    Args:
        ctx: Application context.

    Returns:
        Process exit code: 0 on success or cancellation, 1 on failure.
    """
    reporter = ctx.reporter

    with reporter.progress("Checking GitHub connection..."):
        online = ctx.fetcher.probe_reachability()
    if not online:
        reporter.show_error(UNREACHABLE_MESSAGE)
        return EXIT_FAILURE
    reporter.show_success("Connected to GitHub")

    reporter.show_intro("Agent Config Setup")
    selection = prompt_init_flow(ctx.prompter, home=ctx.home, cwd=ctx.cwd)
    if isinstance(selection, Cancelled):
        reporter.show_warning(selection.message)
        return EXIT_OK

    profile = get_agent_profile(selection.agent)
    install_root = ctx.writer.install_root(selection.target, profile)

    try:
        with reporter.progress("Creating backup of existing configuration..."):
            backup = ctx.writer.backup(selection.target, profile)
        if backup is not None:
            reporter.show_info(f"Backup saved to: {backup}")

        with reporter.progress("Fetching configuration from GitHub..."):
            content = ctx.fetcher.fetch(selection.agent)
        reporter.show_success("Content fetched successfully")

        with reporter.progress("Installing configuration..."):
            report = ctx.writer.write(selection, content)
    except Exception as e:
        logger.debug("Installation failed", exc_info=True)
        reporter.show_error(f"Installation failed: {e}")
        return EXIT_FAILURE

    _show_summary(ctx, selection, profile, install_root, report)
    return EXIT_OK


def _show_summary(
    ctx: AppContext,
    selection: Selection,
    profile: AgentProfile,
    install_root: Path,
    report: WriteReport,
) -> None:
    """Print what was installed and what to do next."""
    reporter = ctx.reporter
    reporter.show_outro("Setup complete!")
    reporter.show_line()
    reporter.show_success("Agent configuration has been installed successfully")
    reporter.show_line()
    reporter.show_info("What was installed:")
    reporter.show_line(f"  • Agent: {profile.display_name}")
    reporter.show_line(f"  • Base configuration ({profile.config_file_name})")
    reporter.show_line(f"  • {len(report.skills)} skill(s): {', '.join(report.skills)}")
    reporter.show_line(f"  • {len(report.commands)} command(s): {', '.join(report.commands)}")
    if report.skipped:
        reporter.show_warning(f"Skipped (not available): {', '.join(report.skipped)}")
    reporter.show_line()

    reporter.show_info("Next steps:")
    if selection.target == "global":
        reporter.show_line("  1. This configuration will apply to all your projects")
    else:
        reporter.show_line(
            f"  1. Commit the {profile.config_dir_name}/ directory to version control"
        )
    reporter.show_line(f"  2. Restart {profile.display_name} to apply changes")
    reporter.show_line()
    reporter.show_info(f"Installation location: {install_root}")

"""Interactive selection flow.

prompt_init_flow asks its questions through a Prompter and returns either
a Selection or Cancelled; it never exits the process. RichPrompter is the
terminal implementation.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt

from agent_config.agents import get_agent_profile, list_agent_profiles
from agent_config.catalog import COMMANDS, SKILLS, get_preset, list_presets
from agent_config.models import Selection
from agent_config.paths import resolve_install_root
from agent_config.types import Option

if TYPE_CHECKING:
    from agent_config.protocols import Prompter

CANCEL_MESSAGE = "Installation cancelled"

APPROACH_OPTIONS = (
    Option("preset", "Start with a preset (recommended)"),
    Option("custom", "Custom selection"),
)

COMMIT_STYLE_OPTIONS = (
    Option("conventional", "Conventional Commits (recommended)"),
    Option("semantic", "Semantic Commits"),
    Option("custom", "Custom"),
)

_NONE_ANSWERS = {"0", "none"}

T = TypeVar("T")


class PromptCancelled(Exception):
    """The user aborted an interactive prompt."""

    pass


@dataclass(frozen=True)
class Cancelled:
    """Outcome of a selection flow the user abandoned."""

    message: str = CANCEL_MESSAGE


def target_options(config_dir_name: str) -> tuple[Option, ...]:
    """Install target choices labelled with the agent's directory."""
    return (
        Option("project", f"Project ({config_dir_name}/) - Local to this project"),
        Option("global", f"Global (~/{config_dir_name}/) - All projects"),
    )


def prompt_init_flow(
    prompter: Prompter,
    home: Path | None = None,
    cwd: Path | None = None,
) -> Selection | Cancelled:
    """Walk the user through choosing what to install.

    Args:
        prompter: Asks the questions.
        home: Home directory override, used to detect an existing global install.
        cwd: Working directory override, used to detect an existing project install.

    Returns:
        The completed Selection, or Cancelled if the user aborted or declined
        to continue over an existing configuration.
    """
    try:
        return _ask_selection(prompter, home, cwd)
    except PromptCancelled:
        return Cancelled()


def _ask_selection(prompter: Prompter, home: Path | None, cwd: Path | None) -> Selection:
    agent = prompter.select(
        "Which AI agent are you configuring?",
        [Option(p.id, p.display_name, p.hint) for p in list_agent_profiles()],
    )
    profile = get_agent_profile(agent)

    target = prompter.select(
        "Where would you like to install the configuration?",
        target_options(profile.config_dir_name),
    )

    install_root = resolve_install_root(target, profile.config_dir_name, home=home, cwd=cwd)
    if install_root.exists():
        proceed = prompter.confirm(
            f"Existing configuration found at {install_root}. Continue?", default=False
        )
        if not proceed:
            raise PromptCancelled

    approach = prompter.select("How would you like to configure?", APPROACH_OPTIONS)

    preset_id: str | None = None
    skills: list[str] = []
    commands: list[str] = []
    commit_style = "conventional"

    if approach == "preset":
        preset_id = prompter.select(
            "Select a preset:",
            [Option(key, preset.name, preset.description) for key, preset in list_presets()],
        )
        preset = get_preset(preset_id)
        if preset is not None:
            skills = list(preset.skills)
            commands = list(preset.commands)
            commit_style = preset.commit_style

        if prompter.confirm("Would you like to customize this preset?", default=False):
            skills = prompter.multiselect("Select skills to include:", SKILLS, skills)
            commands = prompter.multiselect("Select commands to include:", COMMANDS, commands)
    else:
        skills = prompter.multiselect("Select skills to include:", SKILLS)
        commands = prompter.multiselect("Select commands to include:", COMMANDS)

    commit_style = prompter.select(
        "Git commit style preference:", COMMIT_STYLE_OPTIONS, default=commit_style
    )

    custom_git_rules = None
    if commit_style == "custom":
        custom_git_rules = prompter.text("Describe your git commit rules (blank for none):")

    return Selection(
        agent=agent,
        target=target,
        approach=approach,
        preset=preset_id,
        skills=skills,
        commands=commands,
        commit_style=commit_style,
        custom_git_rules=custom_git_rules,
    )


def parse_multiselect(
    answer: str, options: Sequence[Option], defaults: Sequence[str] = ()
) -> list[str]:
    """Turn a comma-separated list of option numbers into values.

    A blank answer keeps the defaults; "0" or "none" selects nothing.

    Args:
        answer: Raw user input, e.g. "1, 3".
        options: The numbered options (1-based).
        defaults: Values pre-selected before the question.

    Returns:
        Selected values in option order.

    Raises:
        ValueError: If an entry is not a number in range.
    """
    answer = answer.strip()
    if not answer:
        chosen = set(defaults)
    elif answer.lower() in _NONE_ANSWERS:
        chosen = set()
    else:
        chosen = set()
        for part in answer.split(","):
            part = part.strip()
            if not part:
                continue
            if not part.isdigit() or not 1 <= int(part) <= len(options):
                raise ValueError(f"Invalid choice: {part}")
            chosen.add(options[int(part) - 1].value)
    return [option.value for option in options if option.value in chosen]


class RichPrompter:
    """Prompter rendering numbered lists with rich."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize prompter.

        Args:
            console: Console to prompt on. Defaults to a new stdout console.
        """
        self.console = console or Console()

    def select(
        self, message: str, options: Sequence[Option], default: str | None = None
    ) -> str:
        """Prompt user to pick one option.

        Args:
            message: Question to show.
            options: Choices, shown numbered from 1.
            default: Value chosen on a blank answer. Defaults to the first option.

        Returns:
            The chosen option's value.

        Raises:
            PromptCancelled: On Ctrl-C or end of input.
        """
        values = [option.value for option in options]
        default_index = values.index(default) + 1 if default in values else 1

        self.console.print(f"\n[bold]{escape(message)}[/bold]")
        for i, option in enumerate(options, 1):
            self.console.print(f"  [{i}] {self._describe(option)}")

        choice = self._ask(
            lambda: Prompt.ask(
                "Select option",
                choices=[str(i) for i in range(1, len(options) + 1)],
                default=str(default_index),
                show_choices=False,
                console=self.console,
            )
        )
        return options[int(choice) - 1].value

    def multiselect(
        self, message: str, options: Sequence[Option], defaults: Sequence[str] = ()
    ) -> list[str]:
        """Prompt user to pick any number of options.

        Args:
            message: Question to show.
            options: Choices, shown numbered from 1.
            defaults: Values pre-selected; kept on a blank answer.

        Returns:
            Chosen values in option order.

        Raises:
            PromptCancelled: On Ctrl-C or end of input.
        """
        self.console.print(f"\n[bold]{escape(message)}[/bold]")
        for i, option in enumerate(options, 1):
            marker = "◉" if option.value in defaults else "○"
            self.console.print(f"  {marker} [{i}] {self._describe(option)}")

        while True:
            answer = self._ask(
                lambda: Prompt.ask(
                    "Numbers separated by commas (Enter keeps ◉, 0 for none)",
                    default="",
                    show_default=False,
                    console=self.console,
                )
            )
            try:
                return parse_multiselect(answer, options, defaults)
            except ValueError as e:
                self.console.print(f"[red]{escape(str(e))}[/red]")

    def confirm(self, message: str, default: bool = False) -> bool:
        """Show confirmation prompt.

        Raises:
            PromptCancelled: On Ctrl-C or end of input.
        """
        return self._ask(lambda: Confirm.ask(message, default=default, console=self.console))

    def text(self, message: str, default: str = "") -> str:
        """Prompt for free text.

        Raises:
            PromptCancelled: On Ctrl-C or end of input.
        """
        return self._ask(
            lambda: Prompt.ask(message, default=default, show_default=False, console=self.console)
        )

    def _ask(self, ask: Callable[[], T]) -> T:
        try:
            return ask()
        except (KeyboardInterrupt, EOFError) as e:
            raise PromptCancelled from e

    @staticmethod
    def _describe(option: Option) -> str:
        label = escape(option.label)
        if option.hint:
            return f"{label} [dim]- {escape(option.hint)}[/dim]"
        return label

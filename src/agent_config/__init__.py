"""Installer for AI coding agent configuration, skills and commands."""

from agent_config.config import VERSION

__version__ = VERSION

# Export protocol interfaces for type hints and dependency injection
from agent_config.protocols import (
    ConfigInstaller,
    FileSystem,
    Prompter,
    Reporter,
    TemplateSource,
)

__all__ = [
    "__version__",
    "ConfigInstaller",
    "FileSystem",
    "Prompter",
    "Reporter",
    "TemplateSource",
]

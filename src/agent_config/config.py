"""Settings and fixed locations for agent-config."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

VERSION = "0.2.0"

# Raw file root of the template repository
RAW_BASE_URL = "https://raw.githubusercontent.com/whyleonardo/agent-config/main"

# Resource checked before prompting to confirm the repository is reachable
PROBE_PATH = "templates/agents/claude-code/BASE_CONFIG.md"

# Seconds to wait on a single HTTP request
DEFAULT_TIMEOUT = 10.0

ENV_BASE_URL = "AGENT_CONFIG_BASE_URL"
ENV_TIMEOUT = "AGENT_CONFIG_TIMEOUT"
ENV_DEBUG = "AGENT_CONFIG_DEBUG"

_TRUTHY = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    """Runtime settings, overridable through the environment."""

    model_config = ConfigDict(frozen=True)

    base_url: str = RAW_BASE_URL
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    debug: bool = False

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value:
            raise ValueError("base_url cannot be empty")
        return value

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            Settings with any AGENT_CONFIG_* overrides applied.

        Raises:
            pydantic.ValidationError: If an override has an invalid value.
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}
        if env.get(ENV_BASE_URL):
            values["base_url"] = env[ENV_BASE_URL]
        if env.get(ENV_TIMEOUT):
            values["timeout"] = env[ENV_TIMEOUT]
        if env.get(ENV_DEBUG):
            values["debug"] = env[ENV_DEBUG].strip().lower() in _TRUTHY
        return cls.model_validate(values)

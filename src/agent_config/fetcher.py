"""Template retrieval from the remote repository."""

from __future__ import annotations

import logging
import ssl
import urllib.error
import urllib.request
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from agent_config.catalog import COMMAND_IDS, SKILL_IDS
from agent_config.config import DEFAULT_TIMEOUT, PROBE_PATH, RAW_BASE_URL
from agent_config.types import FetchedContent

if TYPE_CHECKING:
    from agent_config.protocols import Reporter

logger = logging.getLogger(__name__)

Opener = Callable[..., Any]


class FetchError(Exception):
    """A template resource could not be retrieved."""

    pass


def base_config_resource(agent_id: str) -> str:
    """Remote path of an agent's base configuration."""
    return f"templates/agents/{agent_id}/BASE_CONFIG.md"


def skill_resource(skill_id: str) -> str:
    """Remote path of a skill."""
    return f"templates/skills/{skill_id}/SKILL.md"


def command_resource(command_id: str) -> str:
    """Remote path of a command."""
    return f"templates/commands/{command_id}.md"


class TemplateFetcher:
    """Fetches base configs, skills and commands over HTTP."""

    def __init__(
        self,
        base_url: str = RAW_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        reporter: Reporter | None = None,
        opener: Opener | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            base_url: Root URL the resource paths are appended to.
            timeout: Seconds to wait on each request.
            reporter: Receives warnings for resources that fail to fetch.
            opener: Callable with the urllib.request.urlopen signature.

        Note:
            Prefer using factory method `create()` for construction.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.reporter = reporter
        self._opener = opener or urllib.request.urlopen
        self._ssl_context = ssl.create_default_context()

    @classmethod
    def create(
        cls,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        reporter: Reporter | None = None,
    ) -> TemplateFetcher:
        """Create a fetcher for a custom repository root.

        Args:
            base_url: Root URL of the template repository.
            timeout: Seconds to wait on each request.
            reporter: Receives warnings for resources that fail to fetch.

        Returns:
            Configured TemplateFetcher instance.
        """
        return cls(base_url=base_url, timeout=timeout, reporter=reporter)

    def url_for(self, path: str) -> str:
        """Full URL of a resource path."""
        return f"{self.base_url}/{path}"

    def fetch_file(self, path: str) -> str:
        """Download one text resource.

        Args:
            path: Resource path relative to the repository root.

        Returns:
            The decoded resource text.

        Raises:
            FetchError: On a non-success status, transport failure or bad encoding.
        """
        request = urllib.request.Request(self.url_for(path))
        logger.debug("GET %s", request.full_url)
        try:
            with self._opener(
                request, timeout=self.timeout, context=self._ssl_context
            ) as response:
                status = getattr(response, "status", 200)
                if not 200 <= status < 300:
                    raise FetchError(f"Failed to fetch {path}: HTTP {status}")
                return response.read().decode("utf-8")
        except urllib.error.HTTPError as e:
            raise FetchError(f"Failed to fetch {path}: HTTP {e.code}: {e.reason}") from e
        except urllib.error.URLError as e:
            raise FetchError(f"Failed to fetch {path}: {e.reason}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise FetchError(f"Failed to fetch {path}: {e}") from e

    def fetch(self, agent_id: str) -> FetchedContent:
        """Fetch the base config for an agent plus the full skill and command catalog.

        The base config is required. Skills and commands that fail are
        reported as warnings and left out of the result.

        Args:
            agent_id: Agent whose base configuration to fetch.

        Returns:
            FetchedContent, possibly missing some skills or commands.

        Raises:
            FetchError: If the base configuration cannot be fetched.
        """
        content = FetchedContent(base_config=self.fetch_file(base_config_resource(agent_id)))

        for skill_id in SKILL_IDS:
            try:
                content.skills[skill_id] = self.fetch_file(skill_resource(skill_id))
            except FetchError as e:
                logger.warning("%s", e)
                self._warn(f"Failed to fetch skill: {skill_id}")

        for command_id in COMMAND_IDS:
            try:
                content.commands[command_id] = self.fetch_file(command_resource(command_id))
            except FetchError as e:
                logger.warning("%s", e)
                self._warn(f"Failed to fetch command: {command_id}")

        return content

    def probe_reachability(self) -> bool:
        """Check that the repository answers for a known resource.

        Returns:
            True if a HEAD request for the probe resource succeeds, False otherwise.
        """
        request = urllib.request.Request(self.url_for(PROBE_PATH), method="HEAD")
        try:
            with self._opener(
                request, timeout=self.timeout, context=self._ssl_context
            ) as response:
                status = getattr(response, "status", 200)
                return 200 <= status < 300
        except Exception as e:
            logger.debug("Reachability probe failed: %s", e)
            return False

    def _warn(self, message: str) -> None:
        if self.reporter is not None:
            self.reporter.show_warning(message)

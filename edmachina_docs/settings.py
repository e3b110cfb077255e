"""Repository coordinates and credentials for the documentation server."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"


def load_env() -> None:
    """Load environment from .env in the current working directory."""
    env_path = Path.cwd() / ".env"

    if env_path.exists():
        load_dotenv(env_path)
        logger.info("Loaded env from %s", env_path)
    else:
        logger.warning("No .env found at %s, using environment variables", env_path)


@dataclass(frozen=True)
class RepoSettings:
    """Where the documentation lives and how to authenticate against it."""

    token: str
    owner: str
    repo: str
    branch: str
    api_url: str = DEFAULT_API_URL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "RepoSettings":
        """Build settings from environment variables.

        Only presence is checked: missing coordinates are logged, and a
        missing token is reported later by each tool call.
        """
        env = os.environ if environ is None else environ
        settings = cls(
            token=env.get("GITHUB_TOKEN", ""),
            owner=env.get("GITHUB_REPO_OWNER", ""),
            repo=env.get("GITHUB_REPO_NAME", ""),
            branch=env.get("GITHUB_BRANCH", ""),
            api_url=env.get("GITHUB_API_URL") or DEFAULT_API_URL,
        )
        for var, value in (
            ("GITHUB_REPO_OWNER", settings.owner),
            ("GITHUB_REPO_NAME", settings.repo),
            ("GITHUB_BRANCH", settings.branch),
        ):
            if not value:
                logger.warning("%s not set", var)
        if not settings.token:
            logger.warning("GITHUB_TOKEN not set; documentation tools will fail")
        return settings

    @property
    def has_credential(self) -> bool:
        return bool(self.token)

    @property
    def repo_url(self) -> str:
        """Browser URL of the repository, used in error messages."""
        return f"https://github.com/{self.owner}/{self.repo}"

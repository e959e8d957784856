"""Application configuration and defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


def _default_github_token() -> str | None:
    """Return the GitHub token from GITHUB_TOKEN, or None when unset or empty."""
    return os.environ.get("GITHUB_TOKEN") or None


@dataclass
class Settings:
    github_token: str | None = field(default_factory=_default_github_token)
    github_api_url: str = "https://api.github.com"
    github_accept: str = "application/vnd.github.v3+json"
    user_agent: str = "renovate-config-updater"
    request_timeout: float | None = None  # transport default
    config_dir: Path = field(default_factory=Path.cwd)

    def releases_url(self, github_repo: str) -> str:
        return f"{self.github_api_url}/repos/{github_repo}/releases"


# Global singleton
settings = Settings()

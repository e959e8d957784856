"""GitHub releases API wrapper."""

from __future__ import annotations

import logging
from typing import Any

import requests

from percona_digests.config.settings import Settings, settings as default_settings
from percona_digests.core.errors import UpstreamUnavailable
from percona_digests.models.release import ReleaseInfo

logger = logging.getLogger(__name__)


class GitHubClient:
    """Thin wrapper around the GitHub REST releases endpoint.

    The token is passed in explicitly; nothing below this class reads the
    environment.
    """

    def __init__(
        self,
        token: str | None = None,
        config: Settings | None = None,
        session: requests.Session | None = None,
    ):
        self.config = config or default_settings
        self.token = token
        self._session = session

    @property
    def session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def headers(self) -> dict[str, str]:
        headers = {
            "Accept": self.config.github_accept,
            "User-Agent": self.config.user_agent,
        }
        # Only used for rate-limit relief
        if self.token:
            headers["Authorization"] = f"token {self.token}"
        return headers

    def list_releases(self, github_repo: str) -> list[ReleaseInfo]:
        """Return the first page of releases for ``org/repo``, newest first."""
        url = self.config.releases_url(github_repo)
        logger.debug("GET %s", url)
        try:
            response = self.session.get(
                url, headers=self.headers(), timeout=self.config.request_timeout
            )
        except requests.RequestException as exc:
            raise UpstreamUnavailable(f"Failed to fetch GitHub releases: {exc}") from exc

        if response.status_code != 200:
            raise UpstreamUnavailable(
                f"Failed to fetch GitHub releases (HTTP {response.status_code})\n"
                f"Response: {response.text}"
            )

        try:
            payload: Any = response.json()
        except ValueError as exc:
            raise UpstreamUnavailable(f"GitHub releases response is not JSON: {exc}") from exc
        if not isinstance(payload, list):
            raise UpstreamUnavailable("GitHub releases response is not a list")
        return [ReleaseInfo.from_dict(entry) for entry in payload if isinstance(entry, dict)]

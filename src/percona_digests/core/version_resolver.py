"""Pick the operator version to process."""

from __future__ import annotations

import logging

from percona_digests.core.errors import NoReleasesFound, NoStableReleasesFound
from percona_digests.core.github_client import GitHubClient
from percona_digests.models import OperatorProfile

logger = logging.getLogger(__name__)


def resolve_version(
    operator: OperatorProfile,
    client: GitHubClient,
    explicit_version: str | None = None,
) -> str:
    """Return ``explicit_version`` as given, or the latest stable GitHub release.

    Releases are taken in the order the API returns them (newest first); the
    first one that is neither a draft nor a pre-release wins.
    """
    if explicit_version is not None:
        logger.debug("Using explicit version %s for %s", explicit_version, operator.name)
        return explicit_version

    logger.info("Fetching latest release from GitHub API for %s...", operator.github_repo)
    releases = client.list_releases(operator.github_repo)
    if not releases:
        raise NoReleasesFound("No releases found on GitHub")

    stable = [r for r in releases if r.is_stable]
    if not stable:
        raise NoStableReleasesFound("No stable releases found on GitHub")

    latest = stable[0]
    logger.info("Latest stable Percona version from GitHub: %s", latest.version)
    logger.info("Release date: %s", latest.published_at or "unknown")
    return latest.version

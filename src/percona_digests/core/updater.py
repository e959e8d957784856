"""Run the resolve -> scrape -> merge pipeline for one operator."""

from __future__ import annotations

import logging
from pathlib import Path

import requests

from percona_digests.config.settings import Settings, settings as default_settings
from percona_digests.core.config_merger import build_image_configs, update_config_file
from percona_digests.core.errors import NoCertifiedImages
from percona_digests.core.github_client import GitHubClient
from percona_digests.core.notes_scraper import fetch_certified_images
from percona_digests.core.version_resolver import resolve_version
from percona_digests.models import OperatorProfile
from percona_digests.models.images import UpdateResult

logger = logging.getLogger(__name__)


class DigestUpdater:
    """Update one operator's Renovate config from its latest release notes."""

    def __init__(
        self,
        operator: OperatorProfile,
        version: str | None = None,
        config: Settings | None = None,
        client: GitHubClient | None = None,
        session: requests.Session | None = None,
    ):
        self.operator = operator
        self.config = config or default_settings
        self.session = session
        self.client = client or GitHubClient(
            token=self.config.github_token, config=self.config, session=session
        )
        self.requested_version = version

    @property
    def config_path(self) -> Path:
        return Path(self.config.config_dir) / self.operator.config_file

    def run(self) -> UpdateResult:
        version = resolve_version(self.operator, self.client, self.requested_version)
        url = self.operator.release_notes_url(version)
        logger.info("Processing %s v%s", self.operator.display_name, version)

        images = fetch_certified_images(url, session=self.session, config=self.config)
        if not images:
            raise NoCertifiedImages("No certified images found in release notes")

        image_configs = build_image_configs(images)
        umbrella_updated = update_config_file(self.config_path, image_configs)

        return UpdateResult(
            operator=self.operator,
            version=version,
            release_notes_url=url,
            config_path=self.config_path,
            images=images,
            image_configs=image_configs,
            umbrella_updated=umbrella_updated,
        )

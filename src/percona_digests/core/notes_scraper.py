"""Scrape certified images and digests from an operator's release notes."""

from __future__ import annotations

import logging
import re

import bs4
import requests

from percona_digests.config.settings import Settings, settings as default_settings
from percona_digests.core.errors import NotesUnavailable
from percona_digests.models.images import ImageVersionMap
from percona_digests.models.renovate import IMAGE_PREFIX

logger = logging.getLogger(__name__)

_DIGEST = re.compile(r"[a-f0-9]{64}", re.IGNORECASE)
# "percona/percona-xtradb-cluster:8.0.42-33.1 (default)" -> name, version
_IMAGE_REF = re.compile(r"(percona/[^:]+):(.+?)(?:\s+\([^)]+\))?", re.DOTALL)
_HEADER_WORDS = ("image", "digest")


def fetch_release_notes(
    url: str,
    session: requests.Session | None = None,
    config: Settings | None = None,
) -> str:
    """Download the release-notes HTML document."""
    config = config or default_settings
    http = session or requests.Session()
    logger.info("Fetching: %s", url)
    try:
        response = http.get(url, timeout=config.request_timeout)
    except requests.RequestException as exc:
        raise NotesUnavailable(f"Failed to fetch release notes: {exc}") from exc
    if response.status_code != 200:
        raise NotesUnavailable(f"Failed to fetch release notes (HTTP {response.status_code})")
    return response.text


def _is_header_like(*cells: str) -> bool:
    return any(word in cell.lower() for cell in cells for word in _HEADER_WORDS)


def parse_certified_images(html: str) -> ImageVersionMap:
    """Extract ``{image: {version: digest}}`` from every table row in ``html``.

    Only rows whose first cell is a ``percona/`` image reference and whose
    second cell is a bare sha256 hex digest are kept.
    """
    images: ImageVersionMap = {}
    soup = bs4.BeautifulSoup(html, "html.parser")

    for row in soup.find_all("tr"):
        cells = row.find_all("td")
        if len(cells) < 2:
            continue

        image_cell = cells[0].get_text().strip()
        digest_cell = cells[1].get_text().strip()

        if (
            _is_header_like(image_cell, digest_cell)
            or not image_cell.startswith(IMAGE_PREFIX)
            or not _DIGEST.fullmatch(digest_cell)
        ):
            continue

        match = _IMAGE_REF.fullmatch(image_cell)
        if not match:
            logger.debug("Skipping row without an image tag: %r", image_cell)
            continue

        image_name = match.group(1).strip()
        version = match.group(2).strip()
        images.setdefault(image_name, {})[version] = digest_cell.lower()

    return images


def fetch_certified_images(
    url: str,
    session: requests.Session | None = None,
    config: Settings | None = None,
) -> ImageVersionMap:
    return parse_certified_images(fetch_release_notes(url, session=session, config=config))

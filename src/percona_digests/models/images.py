"""Certified image and update result models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from percona_digests.models import OperatorProfile

# image name -> {version -> 64-char hex digest}
ImageVersionMap = dict[str, dict[str, str]]


@dataclass
class ImageRuleConfig:
    image: str
    versions: list[str]
    allowed_versions: str  # "/^(v1|v2)$/"
    latest_version: str
    latest_digest: str  # "sha256:<hex>"


@dataclass
class UpdateResult:
    operator: OperatorProfile
    version: str
    release_notes_url: str
    config_path: Path
    images: ImageVersionMap = field(default_factory=dict)
    image_configs: dict[str, ImageRuleConfig] = field(default_factory=dict)
    umbrella_updated: bool = False

    @property
    def image_count(self) -> int:
        return len(self.images)

"""Renovate packageRules shapes and the predicates that classify them.

Rules are kept as plain dicts so that fields this tool does not know about
survive a load/merge/write cycle untouched.
"""

from __future__ import annotations

from typing import Any

from percona_digests.models.images import ImageRuleConfig

# Package name prefix shared by every certified image.
IMAGE_PREFIX = "percona/"

# Wildcard matcher carried by the single umbrella rule.
UMBRELLA_MATCHER = "/^percona//"

PackageRule = dict[str, Any]


def _package_names(rule: PackageRule) -> list[str]:
    names = rule.get("matchPackageNames")
    if not isinstance(names, list):
        return []
    return [n for n in names if isinstance(n, str)]


def is_umbrella_rule(rule: PackageRule) -> bool:
    """True if the rule matches every image through the wildcard matcher."""
    return UMBRELLA_MATCHER in _package_names(rule)


def is_image_rule(rule: PackageRule) -> bool:
    """True if the rule pins a specific image (as emitted by a previous run)."""
    return any(
        name.startswith(IMAGE_PREFIX) and name != UMBRELLA_MATCHER
        for name in _package_names(rule)
    )


def image_rule(config: ImageRuleConfig) -> PackageRule:
    return {
        "matchPackageNames": [config.image],
        "allowedVersions": config.allowed_versions,
        "replacementName": config.image,
        "replacementVersion": config.latest_version,
        "replacementDigest": config.latest_digest,
    }

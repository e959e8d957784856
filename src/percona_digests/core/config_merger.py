"""Turn scraped digests into Renovate packageRules and splice them into a config."""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any

from percona_digests.core.errors import ConfigFileMissing, InvalidConfigFile
from percona_digests.models.images import ImageRuleConfig, ImageVersionMap
from percona_digests.models.renovate import PackageRule, image_rule, is_image_rule, is_umbrella_rule
from percona_digests.utils.patterns import allowed_versions_pattern, union_pattern
from percona_digests.utils.version_compare import latest_version

logger = logging.getLogger(__name__)


def build_image_configs(images: ImageVersionMap) -> dict[str, ImageRuleConfig]:
    """Compute the allow-list and pinned digest for every discovered image."""
    configs: dict[str, ImageRuleConfig] = {}

    for image_name, versions in images.items():
        if not versions:
            continue
        version_list = list(versions)
        latest = latest_version(version_list)
        configs[image_name] = ImageRuleConfig(
            image=image_name,
            versions=version_list,
            allowed_versions=allowed_versions_pattern(version_list),
            latest_version=latest,
            latest_digest=f"sha256:{versions[latest]}",
        )
        logger.debug("%s: latest %s of %d version(s)", image_name, latest, len(version_list))

    return configs


def merge_package_rules(
    rules: list[PackageRule],
    image_configs: dict[str, ImageRuleConfig],
) -> tuple[list[PackageRule], bool]:
    """Replace generated per-image rules and refresh the umbrella rule.

    Returns the new rule list and whether an umbrella rule was found. Rules
    that do not pin a ``percona/`` image are kept in their original order.
    """
    merged = [copy.deepcopy(rule) for rule in rules if not is_image_rule(rule)]
    dropped = len(rules) - len(merged)
    if dropped:
        logger.debug("Dropped %d previously generated image rule(s)", dropped)

    merged.extend(image_rule(config) for config in image_configs.values())

    umbrella = next((rule for rule in merged if is_umbrella_rule(rule)), None)
    if umbrella is None:
        logger.debug("No umbrella rule present; leaving rules without one")
        return merged, False

    umbrella["allowedVersions"] = union_pattern(c.versions for c in image_configs.values())
    return merged, True


def merge_into_config(
    config: dict[str, Any],
    image_configs: dict[str, ImageRuleConfig],
) -> dict[str, Any]:
    """Return a copy of ``config`` with its packageRules merged.

    All other top-level keys pass through unchanged.
    """
    rules = config.get("packageRules") or []
    merged_rules, _ = merge_package_rules(rules, image_configs)
    updated = dict(config)
    updated["packageRules"] = merged_rules
    return updated


def load_renovate_config(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigFileMissing(f"{path} not found")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise InvalidConfigFile(f"{path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise InvalidConfigFile(f"{path} must contain a JSON object")
    if not isinstance(data.get("packageRules") or [], list):
        raise InvalidConfigFile(f"{path}: packageRules must be a list")
    return data


def write_renovate_config(path: Path, config: dict[str, Any]) -> None:
    """Overwrite ``path`` with pretty-printed JSON."""
    path.write_text(json.dumps(config, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")


def update_config_file(path: Path, image_configs: dict[str, ImageRuleConfig]) -> bool:
    """Load, merge and rewrite the Renovate config at ``path``.

    Returns True if an umbrella rule was found and refreshed.
    """
    merged = merge_into_config(load_renovate_config(path), image_configs)
    write_renovate_config(path, merged)
    rules = merged["packageRules"]
    logger.debug("Wrote %d package rule(s) to %s", len(rules), path)
    return any(is_umbrella_rule(rule) for rule in rules)

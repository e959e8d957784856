"""Table / JSON / YAML output dispatch."""

from __future__ import annotations

import json
from typing import Any

import yaml
from rich.console import Console

from percona_digests.models.images import UpdateResult

console = Console()


def _result_to_dict(r: UpdateResult) -> dict[str, Any]:
    return {
        "operator": r.operator.name,
        "version": r.version,
        "release_notes_url": r.release_notes_url,
        "config_file": str(r.config_path),
        "umbrella_updated": r.umbrella_updated,
        "images": {
            image: {
                "versions": cfg.versions,
                "allowed_versions": cfg.allowed_versions,
                "latest_version": cfg.latest_version,
                "latest_digest": cfg.latest_digest,
            }
            for image, cfg in r.image_configs.items()
        },
    }


def output_results(results: list[UpdateResult], fmt: str) -> None:
    if fmt == "json":
        data = [_result_to_dict(r) for r in results]
        console.print_json(json.dumps(data, indent=2))
    elif fmt == "yaml":
        data = [_result_to_dict(r) for r in results]
        console.print(yaml.dump(data, default_flow_style=False, sort_keys=False), markup=False, soft_wrap=True)
    else:
        from percona_digests.output.tables import certified_images_table, update_summary_panel
        for r in results:
            console.print(certified_images_table(r))
            console.print(update_summary_panel(r))

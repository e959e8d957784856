"""percona-digests - Pin certified Percona images in Renovate configs."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from percona_digests.cli.options import (
    ConfigDirOption,
    OperatorOption,
    OutputOption,
    VerboseOption,
    VersionOption,
)
from percona_digests.config.log_setup import configure_logging
from percona_digests.config.operators import select_operators
from percona_digests.config.settings import settings
from percona_digests.core.errors import UpdaterError
from percona_digests.core.updater import DigestUpdater
from percona_digests.models.images import UpdateResult
from percona_digests.output.formatters import output_results

logger = logging.getLogger(__name__)
console = Console()

_OUTPUT_FORMATS = ("table", "json", "yaml")


def update(
    operator: str = OperatorOption,
    version: Optional[str] = VersionOption,
    config_dir: Optional[Path] = ConfigDirOption,
    output: str = OutputOption,
    verbose: bool = VerboseOption,
) -> None:
    """Update Renovate configs with the certified image digests of a Percona release."""
    if output not in _OUTPUT_FORMATS:
        raise typer.BadParameter(f"must be one of {', '.join(_OUTPUT_FORMATS)}", param_hint="--output")
    configure_logging(verbose, stderr=output != "table")

    cfg = replace(settings, config_dir=config_dir) if config_dir else settings
    results: list[UpdateResult] = []

    try:
        profiles = select_operators(operator)
        for profile in profiles:
            if len(profiles) > 1:
                logger.info("%s %s", "=" * 50, profile.name)
            result = DigestUpdater(profile, version=version, config=cfg).run()
            logger.info("Found %d certified images:", result.image_count)
            for name, versions in result.images.items():
                logger.info("  %s: %s", name, ", ".join(versions))
            logger.info("Successfully updated %s", result.config_path)
            results.append(result)
    except UpdaterError as exc:
        console.print(f"[red]ERROR:[/red] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(code=1)

    output_results(results, output)

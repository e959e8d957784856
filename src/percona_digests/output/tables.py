"""Rich table builders for the run summary."""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table

from percona_digests.models.images import UpdateResult
from percona_digests.utils.version_compare import sort_versions


def certified_images_table(result: UpdateResult) -> Table:
    table = Table(
        title=f"Certified images: {result.operator.display_name} v{result.version}",
        expand=True,
    )
    table.add_column("Image", style="magenta", no_wrap=True)
    table.add_column("Versions", style="dim")
    table.add_column("Pinned", style="bold")
    table.add_column("Digest", style="cyan", no_wrap=True)

    for image, cfg in sorted(result.image_configs.items()):
        table.add_row(
            image,
            ", ".join(sort_versions(cfg.versions)),
            cfg.latest_version,
            cfg.latest_digest[: len("sha256:") + 12],
        )
    return table


def update_summary_panel(result: UpdateResult) -> Panel:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="bold cyan", no_wrap=True)
    table.add_column("Value")

    table.add_row("Operator", result.operator.name)
    table.add_row("Version", result.version)
    table.add_row("Release Notes", result.release_notes_url)
    table.add_row("Config File", str(result.config_path))
    table.add_row("Images", str(result.image_count))
    table.add_row("Umbrella Rule", "updated" if result.umbrella_updated else "[yellow]not present[/yellow]")

    return Panel(table, title="[bold]Renovate config updated[/bold]", border_style="green")

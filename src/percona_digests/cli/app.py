"""Root Typer application."""

from __future__ import annotations

import typer

app = typer.Typer(
    name="percona-digests",
    help="Pin certified Percona operator images to their digests in Renovate configs.",
    add_completion=False,
)


def _register_commands() -> None:
    from percona_digests.cli.commands.update_cmd import update

    app.command()(update)


_register_commands()


def main() -> None:
    app()

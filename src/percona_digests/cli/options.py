"""Shared CLI options."""

from __future__ import annotations

import typer

OperatorOption = typer.Option(
    "pxc", "--operator", "-o", help="Operator to process: pxc, postgresql, or all"
)
VersionOption = typer.Option(None, "--version", "-v", help="Specific Percona version to process")
ConfigDirOption = typer.Option(
    None, "--config-dir", help="Directory holding the Renovate JSON files (default: cwd)"
)
OutputOption = typer.Option("table", "--output", help="Output format: table, json, yaml")
VerboseOption = typer.Option(False, "--verbose", help="Enable debug logging")

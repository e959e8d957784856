"""Root logger setup for the CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(verbose: bool = False, stderr: bool = False) -> None:
    """Print progress lines to stdout, or to stderr when stdout carries JSON or YAML."""
    handler = RichHandler(
        console=Console(stderr=stderr, soft_wrap=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )
    # urllib3 connection chatter is noise at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)

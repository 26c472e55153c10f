"""Console logging setup for the command-line interface."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = "WARNING") -> None:
    """Route log records to stderr through a rich handler.

    Args:
        level: Name of the minimum level to emit. Unknown names fall back to
            ``WARNING``.
    """
    handler = RichHandler(
        console=Console(stderr=True), show_path=False, rich_tracebacks=False
    )
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )

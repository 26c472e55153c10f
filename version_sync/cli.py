"""Typer-based CLI application for `version_sync`.

Running ``version-sync`` with no arguments copies the ``version`` of
``elm.json`` into ``package.json`` in the current directory. Paths and
indentation come from :class:`~version_sync.config.Settings` unless
overridden on the command line.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from .__about__ import __title__, __version__
from .config import get_settings
from .errors import VersionSyncError
from .log import configure_logging
from .sync import synchronize_version

app = typer.Typer(help="Copy a project's version into its package manifest", add_completion=False)
console = Console()


def version_callback(value: bool) -> None:
    """Print the package version and exit if requested.

    Args:
        value: Whether the ``--version`` flag was provided.
    """
    if value:
        console.print(f"{__title__} {__version__}")
        raise typer.Exit()


@app.command()
def sync(
    source: Optional[Path] = typer.Option(  # noqa: UP007 - Optional for clarity in help
        None, "--source", help="File supplying the version (default: elm.json)."
    ),
    target: Optional[Path] = typer.Option(  # noqa: UP007
        None, "--target", help="File whose version is overwritten (default: package.json)."
    ),
    check: bool = typer.Option(
        False, "--check", help="Exit with status 1 if the target is out of date; write nothing."
    ),
    version: Optional[bool] = typer.Option(  # noqa: UP007
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Set the target's version field to the source's version."""
    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        result = synchronize_version(
            source or settings.source_path,
            target or settings.target_path,
            indent=settings.indent,
            dry_run=check,
        )
    except VersionSyncError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc

    if check:
        if result.changed:
            typer.echo(
                f"{result.target_path} has version {result.previous_version}, "
                f"expected {result.version}",
                err=True,
            )
            raise typer.Exit(1)
        console.print(f"{result.target_path} is up to date ({result.version})")
        return

    console.print(f"Set {result.target_path} version to {result.version}")


if __name__ == "__main__":  # pragma: no cover
    app()

"""
kctheme CLI utilities.

Shared helpers used across CLI modules.
"""

import logging
import platform

import typer
from rich.logging import RichHandler

from kctheme._version import get_version


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"kctheme version {get_version()}")
        typer.echo(f"  Python:        {platform.python_implementation()} {platform.python_version()}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        raise typer.Exit()


def configure_logging(verbose: bool = False, debug: bool = False) -> None:
    """Route library logging through rich; WARNING unless asked otherwise."""
    level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=debug)],
        force=True,
    )
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))

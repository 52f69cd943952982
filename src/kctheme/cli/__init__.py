"""
kctheme CLI.

- build.py: theme build and container script commands
- utils.py: shared utilities
"""

from __future__ import annotations

import typer

from kctheme.cli.build import build_command, container_script_command
from kctheme.cli.utils import version_callback

app = typer.Typer(
    help="kctheme - build Keycloak themes from a compiled single-page application",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """kctheme CLI main callback for global options."""
    pass


app.command(name="build")(build_command)
app.command(name="container-script")(container_script_command)


def main() -> None:
    app(standalone_mode=True)


__all__ = ["app", "main"]

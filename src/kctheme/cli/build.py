"""
Theme build commands for the kctheme CLI.

Commands:
- build: Generate the Keycloak theme from the compiled bundle
- container-script: Write a start script for a local Keycloak container
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from kctheme._version import get_version
from kctheme.core.config import load_build_context
from kctheme.core.errors import KcThemeError

from .utils import configure_logging

console = Console()


def build_command(
    project_dir: Path = typer.Option(  # noqa: B008
        Path("."),
        "--project",
        "-p",
        help="Project directory (default: current directory)",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Theme building directory (overrides kctheme.toml)",
    ),
    theme_name: str | None = typer.Option(
        None,
        "--theme-name",
        help="Theme name (overrides kctheme.toml and package.json)",
    ),
    keycloak_version: str | None = typer.Option(
        None,
        "--keycloak-version",
        help="Keycloak release the login theme's stock resources come from",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log progress"),
    debug: bool = typer.Option(False, "--debug", help="Log every file decision"),
) -> None:
    """
    Generate the Keycloak theme.

    Reads [theme] and [paths] from kctheme.toml in the project directory.

    Examples:
        kctheme build                        # Build in current directory
        kctheme build -p ./app -o ./out      # Custom project and output
        kctheme build --theme-name my-theme  # Override theme name
    """
    from kctheme.generate import generate_theme

    configure_logging(verbose=verbose, debug=debug)

    try:
        context = load_build_context(
            project_dir,
            get_version(),
            overrides={"name": theme_name, "login_resources_keycloak_version": keycloak_version},
            output_dir=output.resolve() if output else None,
        )
        result = asyncio.run(generate_theme(context))
    except KcThemeError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if not result.theme_types and not result.email_copied:
        typer.echo(f"Warning: no login, account or email sources in {context.theme_src_dir}", err=True)

    table = Table(title=f"Theme {context.build_options.theme_name}")
    table.add_column("Variant")
    table.add_column("Files", justify="right")
    for theme_type in result.theme_types:
        table.add_row(theme_type.value, str(len(result.files_under(context.theme_dir(theme_type)))))
    if result.email_copied:
        table.add_row("email", str(len(result.files_under(context.email_theme_dir))))
    console.print(table)
    typer.echo(f"Theme written to {context.themes_root / context.build_options.theme_name}")


def container_script_command(
    project_dir: Path = typer.Option(  # noqa: B008
        Path("."),
        "--project",
        "-p",
        help="Project directory (default: current directory)",
    ),
    keycloak_version: str = typer.Option(
        ...,
        "--keycloak-version",
        help="Keycloak image tag to run",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Theme building directory (overrides kctheme.toml)",
    ),
) -> None:
    """Write start_keycloak_testing_container.sh into the theme building directory."""
    from kctheme.testing_container import generate_start_keycloak_testing_container

    try:
        context = load_build_context(
            project_dir, get_version(), output_dir=output.resolve() if output else None
        )
    except KcThemeError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    script = generate_start_keycloak_testing_container(keycloak_version, context.keycloak_theme_building_dir)
    typer.echo(f"Created {script}")

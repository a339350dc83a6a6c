"""Main CLI application."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from .. import __version__
from ..core.errors import MeiyaError
from ..core.models import RenderResult
from ..core.settings import Settings
from ..rendering import engine
from ..scheme.loader import load_scheme
from ..templates.discovery import discover_units

logger = logging.getLogger(__name__)

DONE_LINE = "--- Done!"

app = typer.Typer(
    name="meiya",
    help="Render config templates against a single color scheme.",
    add_completion=False,
)


def format_result(result: RenderResult) -> str:
    """Format the status line printed for a rendered unit."""
    return f'{result.nick} (nosym) -> "{result.output_path}" {result.outcome.label}'


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"meiya {__version__}")
        raise typer.Exit()


@app.command()
def render(
    templates: Annotated[
        Optional[Path],
        typer.Option(
            "--templates",
            "-t",
            help="Templates directory (default: <config-dir>/meiya/templates).",
            metavar="DIR",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show the version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Render every template unit with the configured scheme."""
    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(levelname)s] %(message)s",
    )

    logger.debug("Starting meiya")

    settings = Settings(templates_dir=templates) if templates else Settings()

    try:
        settings.ensure_config_dir()
        scheme = load_scheme(settings.scheme_path)

        templates_dir = settings.resolved_templates_dir
        logger.debug(f"Templates: {templates_dir}")

        for result in engine.render_all(discover_units(templates_dir), scheme):
            typer.echo(format_result(result))
    except MeiyaError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1) from e

    typer.echo(DONE_LINE)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()

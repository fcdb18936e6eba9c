"""CLI commands for wikiviews."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003
from typing import TYPE_CHECKING

import typer

from wikiviews.core.exceptions import WikiviewsError
from wikiviews.logging import configure_logging


if TYPE_CHECKING:
    from wikiviews.config import ErrorPolicy
    from wikiviews.core.services import UniverseReader


app = typer.Typer(
    name="wikiviews",
    help="Wikipedia page-view universe data: locate, decode and export daily files.",
    no_args_is_help=True,
)

DATE_FORMATS = ["%Y-%m-%d", "%Y%m%d"]


def date_argument() -> datetime:
    """Positional DATE argument accepting 2020-03-15 or 20200315."""
    return typer.Argument(  # type: ignore[no-any-return]
        ...,
        help="Reference date (2020-03-15 or 20200315).",
        formats=DATE_FORMATS,
    )


def data_folder_option() -> str | None:
    """--data-folder option shared by every command."""
    return typer.Option(  # type: ignore[no-any-return]
        None,
        "--data-folder",
        "-d",
        help="Storage root (local path or s3:// URI). Defaults to <project root>/data.",
    )


def load_reader(
    data_folder: str | None,
    on_error: ErrorPolicy = "raise",
) -> UniverseReader:
    """Build a UniverseReader for CLI commands.

    Raises:
        typer.Exit: If the configuration is invalid.
    """
    from wikiviews.core.services import UniverseReader

    try:
        return UniverseReader.from_directory(
            data_folder=data_folder or "data", on_error=on_error
        )
    except WikiviewsError as e:
        report_error(e)
        raise typer.Exit(1) from None


def report_error(error: WikiviewsError) -> None:
    """Print an error and its recovery hint to stderr."""
    typer.echo(f"Error: {error}", err=True)
    if error.recovery_hint:
        typer.echo(f"Hint: {error.recovery_hint}", err=True)


@app.callback()
def configure(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging on stderr.",
    ),
) -> None:
    """Set up logging before any command runs."""
    configure_logging(level="DEBUG" if verbose else "WARNING")


@app.command()
def source(
    date: datetime = date_argument(),
    live: bool = typer.Option(
        False,
        "--live",
        help="Locate for live mode (the path is the same as for backtests).",
    ),
    data_folder: str | None = data_folder_option(),
) -> None:
    """Print the path of the universe file for a date."""
    reader = load_reader(data_folder)
    typer.echo(reader.source_for(date.date(), live_mode=live).source)


def main() -> None:
    """Entry point for the CLI."""
    app()

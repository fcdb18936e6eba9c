"""Dates command for CLI."""

from __future__ import annotations

import typer

from wikiviews.cli.main import app, data_folder_option, load_reader, report_error
from wikiviews.core.exceptions import WikiviewsError


@app.command()
def dates(
    data_folder: str | None = data_folder_option(),
) -> None:
    """List dates that have a universe file."""
    reader = load_reader(data_folder)

    try:
        available = reader.available_dates()
    except WikiviewsError as e:
        report_error(e)
        raise typer.Exit(1) from None

    if not available:
        typer.echo(f"No universe files found under {reader.config.data_folder}.")
        return

    for day in available:
        typer.echo(day.isoformat())

"""Show command for CLI."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003

import typer
from rich.console import Console

from wikiviews.cli.formatting import _records_table
from wikiviews.cli.main import (
    app,
    data_folder_option,
    date_argument,
    load_reader,
    report_error,
)
from wikiviews.core.exceptions import WikiviewsError


@app.command()
def show(
    date: datetime = date_argument(),
    skip_errors: bool = typer.Option(
        False,
        "--skip-errors",
        help="Skip lines that fail to decode instead of aborting.",
    ),
    limit: int | None = typer.Option(
        None,
        "--limit",
        "-n",
        min=1,
        help="Show at most this many records.",
    ),
    data_folder: str | None = data_folder_option(),
) -> None:
    """Show the universe records for a date."""
    reader = load_reader(data_folder, on_error="skip" if skip_errors else "raise")

    try:
        records = reader.read(date.date())
    except WikiviewsError as e:
        report_error(e)
        raise typer.Exit(1) from None

    if not records:
        typer.echo(f"No records for {date.date().isoformat()}.")
        return

    shown = records[:limit] if limit else records

    # Force terminal output to ensure tables render correctly in all environments
    console = Console(force_terminal=True)
    console.print(_records_table(shown))
    if len(shown) < len(records):
        typer.echo(f"Showing {len(shown)} of {len(records)} records.")

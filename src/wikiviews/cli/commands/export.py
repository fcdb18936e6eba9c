"""Export command for CLI."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003
from enum import Enum
from pathlib import Path

import typer

from wikiviews.cli.main import (
    app,
    data_folder_option,
    date_argument,
    load_reader,
    report_error,
)
from wikiviews.core.codecs import ArrowCodec, JsonCodec
from wikiviews.core.exceptions import WikiviewsError


class ExportFormat(str, Enum):
    """Output formats for export."""

    json = "json"
    arrow = "arrow"


@app.command()
def export(
    date: datetime = date_argument(),
    output: Path = typer.Argument(help="File to write the encoded records to."),
    fmt: ExportFormat = typer.Option(
        ExportFormat.json,
        "--format",
        "-f",
        help="Encoding of the output file.",
    ),
    data_folder: str | None = data_folder_option(),
) -> None:
    """Decode a day of records and write them as JSON or Arrow IPC."""
    reader = load_reader(data_folder)

    try:
        records = reader.read(date.date())
    except WikiviewsError as e:
        report_error(e)
        raise typer.Exit(1) from None

    codec = JsonCodec() if fmt is ExportFormat.json else ArrowCodec()
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(codec.encode(records))
    typer.echo(f"Wrote {len(records)} record(s) to {output} ({codec.name}).")

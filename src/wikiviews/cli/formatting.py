"""Shared formatting helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.table import Table
from rich.text import Text

from wikiviews.core.formatting import change_to_color, format_decimal


if TYPE_CHECKING:
    from collections.abc import Sequence
    from decimal import Decimal

    from wikiviews.core.models import WikipediaUniverse


def _format_change_with_color(change: Decimal | None) -> Text:
    """Format a percent change with color coding.

    Returns:
        Rich Text: green for gains, red for drops, plain otherwise.
    """
    text = "-" if change is None else f"{format_decimal(change)}%"
    color = change_to_color(change)
    return Text(text, style=color) if color else Text(text)


def _records_table(records: Sequence[WikipediaUniverse]) -> Table:
    """Build a Rich table with one row per record."""
    table = Table()
    table.add_column("Ticker")
    table.add_column("Identifier")
    table.add_column("Page views", justify="right")
    table.add_column("Week", justify="right")
    table.add_column("Month", justify="right")

    for record in records:
        table.add_row(
            record.symbol.value,
            str(record.symbol.id),
            format_decimal(record.page_views),
            _format_change_with_color(record.week_percent_change),
            _format_change_with_color(record.month_percent_change),
        )
    return table

"""Source locator and line decoder for the Wikipedia page-view universe.

Universe files hold one day of records, one per line, with no header::

    AAPL R735QTJ8XC9X,AAPL,1500000,12.5,-3.2

Fields are the encoded security identifier, the ticker, the page-view
count, the week-over-week percent change and the month-over-month percent
change.
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING

from wikiviews.core.exceptions import (
    IdentifierResolutionError,
    MalformedLineError,
    NumericParseError,
    WikiviewsError,
)
from wikiviews.core.identifiers import parse_security_identifier
from wikiviews.core.models import (
    SubscriptionDataSource,
    Symbol,
    TransportMedium,
    WikipediaUniverse,
    as_date,
)
from wikiviews.core.path_utils import join_source


if TYPE_CHECKING:
    from datetime import date, datetime
    from pathlib import Path

    from wikiviews.core.ports import IdentifierResolver


UNIVERSE_DIRECTORY = ("alternative", "quiver", "wikipedia", "universe")
DATE_FORMAT = "%Y%m%d"
FIELD_COUNT = 5

_NUMERIC_FIELDS = (
    (2, "page_views"),
    (3, "week_percent_change"),
    (4, "month_percent_change"),
)

# Invariant-culture decimal: sign, digits, optional fraction and exponent
_DECIMAL_RE = re.compile(r"^[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?$")


def universe_directory(storage_root: str | Path) -> str:
    """Return the directory holding universe files under storage_root."""
    return join_source(storage_root, *UNIVERSE_DIRECTORY)


def filename_for(reference_date: date | datetime) -> str:
    """Return the universe filename for a date, e.g. "20200315.csv"."""
    return f"{as_date(reference_date).strftime(DATE_FORMAT)}.csv"


def locate(
    storage_root: str | Path,
    reference_date: date | datetime,
    live_mode: bool = False,
) -> str:
    """Build the path of the universe file for a date.

    Args:
        storage_root: Configured data folder (local path or URI).
        reference_date: Date whose batch is requested.
        live_mode: Live/backtest flag. The path is the same in both modes.

    Returns:
        Path such as "/data/alternative/quiver/wikipedia/universe/20200315.csv".

    Example:
        >>> from datetime import date
        >>> locate("/data", date(2020, 3, 15))
        '/data/alternative/quiver/wikipedia/universe/20200315.csv'
    """
    _ = live_mode
    return join_source(storage_root, *UNIVERSE_DIRECTORY, filename_for(reference_date))


def get_source(
    storage_root: str | Path,
    reference_date: date | datetime,
    live_mode: bool = False,
) -> SubscriptionDataSource:
    """Return the subscription source for a date, always a local file."""
    return SubscriptionDataSource(
        source=locate(storage_root, reference_date, live_mode),
        transport=TransportMedium.LOCAL_FILE,
    )


def _parse_decimal(line: str, token: str, index: int, field: str) -> Decimal:
    text = token.strip()
    if not _DECIMAL_RE.match(text):
        raise NumericParseError(line, field=field, position=index + 1, token=token)
    try:
        return Decimal(text)
    except InvalidOperation as e:
        raise NumericParseError(
            line, field=field, position=index + 1, token=token, cause=e
        ) from e


def decode(
    line: str,
    reference_date: date | datetime,
    resolver: IdentifierResolver = parse_security_identifier,
) -> WikipediaUniverse:
    """Decode one universe line into a record.

    Args:
        line: Raw comma-separated line.
        reference_date: Date the file was located for. The record covers the
            day before it and ends at it.
        resolver: Turns the identifier token into a SecurityIdentifier.

    Returns:
        The decoded WikipediaUniverse record.

    Raises:
        MalformedLineError: If the line has fewer than five fields.
        NumericParseError: If a numeric field is not a valid decimal.
        IdentifierResolutionError: If the identifier token cannot be resolved.
    """
    line = line.rstrip("\r\n")
    csv = line.split(",")
    if len(csv) < FIELD_COUNT:
        raise MalformedLineError(line, field_count=len(csv))

    page_views, week_change, month_change = (
        _parse_decimal(line, csv[index], index, field)
        for index, field in _NUMERIC_FIELDS
    )

    try:
        sid = resolver(csv[0])
    except (WikiviewsError, ValueError) as e:
        raise IdentifierResolutionError(line, token=csv[0], cause=e) from e

    try:
        symbol = Symbol(id=sid, value=csv[1])
    except ValueError as e:
        raise IdentifierResolutionError(line, token=csv[0], cause=e) from e

    return WikipediaUniverse.for_date(
        symbol,
        reference_date,
        page_views=page_views,
        week_percent_change=week_change,
        month_percent_change=month_change,
    )


def reader(
    line: str,
    reference_date: date | datetime,
    live_mode: bool = False,
    resolver: IdentifierResolver = parse_security_identifier,
) -> WikipediaUniverse:
    """Subscription-style entry point for decode(); live_mode is ignored."""
    _ = live_mode
    return decode(line, reference_date, resolver)

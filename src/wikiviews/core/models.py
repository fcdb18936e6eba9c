"""Core domain models for wikiviews.

These models are pure Python dataclasses with no I/O dependencies.
They represent the Wikipedia page-view universe record and the values
that travel with it.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, ClassVar


if TYPE_CHECKING:
    from wikiviews.core.identifiers import SecurityIdentifier


@dataclass(frozen=True, slots=True)
class Symbol:
    """A security identifier paired with its human-readable ticker.

    Attributes:
        id: The decoded security identifier.
        value: Ticker string as it appears in the data (e.g. "AAPL").
    """

    id: SecurityIdentifier
    value: str

    def __post_init__(self) -> None:
        """Validate that a ticker is present."""
        if not self.value:
            raise ValueError("Symbol value cannot be empty")

    def __str__(self) -> str:
        return self.value


class TransportMedium(Enum):
    """How a located source should be fetched."""

    LOCAL_FILE = "local_file"
    REMOTE_FILE = "remote_file"


@dataclass(frozen=True, slots=True)
class SubscriptionDataSource:
    """Where to read one day of universe data from.

    Attributes:
        source: Local path or URI of the file.
        transport: Transport used to fetch the source.
    """

    source: str
    transport: TransportMedium = TransportMedium.LOCAL_FILE


def as_datetime(value: date | datetime) -> datetime:
    """Normalize a date or datetime to midnight of the same calendar day."""
    if isinstance(value, datetime):
        return datetime.combine(value.date(), time.min)
    return datetime.combine(value, time.min)


def as_date(value: date | datetime) -> date:
    """Drop the time of day from a date or datetime."""
    if isinstance(value, datetime):
        return value.date()
    return value


@dataclass(frozen=True, slots=True)
class WikipediaUniverse:
    """One daily Wikipedia page-view observation for a company.

    The record covers exactly one day: it starts at ``time`` and becomes
    available at ``end_time``, which equals the observation date.

    Attributes:
        symbol: The company the page views belong to.
        time: Start of the covered period (observation date minus one day).
        date: Calendar date of the page-view count.
        page_views: Page views on the date, or None when not reported.
        week_percent_change: View count % change over the prior week,
            as a whole number (e.g. 100% = 100.0).
        month_percent_change: View count % change over the prior month,
            as a whole number.

    Example:
        >>> from datetime import date
        >>> record = WikipediaUniverse.for_date(symbol, date(2020, 3, 15))
        >>> record.end_time
        datetime.datetime(2020, 3, 15, 0, 0)
    """

    PERIOD: ClassVar[timedelta] = timedelta(days=1)

    symbol: Symbol
    time: datetime
    date: date
    page_views: Decimal | None = None
    week_percent_change: Decimal | None = None
    month_percent_change: Decimal | None = None

    @classmethod
    def for_date(
        cls,
        symbol: Symbol,
        reference_date: date | datetime,
        page_views: Decimal | None = None,
        week_percent_change: Decimal | None = None,
        month_percent_change: Decimal | None = None,
    ) -> WikipediaUniverse:
        """Create a record whose period ends at the reference date.

        Args:
            symbol: The company symbol.
            reference_date: Date the batch was requested for.
            page_views: Optional page-view count.
            week_percent_change: Optional week-over-week change.
            month_percent_change: Optional month-over-month change.

        Returns:
            A record with time = reference_date - 1 day.
        """
        return cls(
            symbol=symbol,
            time=as_datetime(reference_date) - cls.PERIOD,
            date=as_date(reference_date),
            page_views=page_views,
            week_percent_change=week_percent_change,
            month_percent_change=month_percent_change,
        )

    @property
    def period(self) -> timedelta:
        """Time between the start and end of the data point, always one day."""
        return self.PERIOD

    @property
    def end_time(self) -> datetime:
        """When the data point ends and becomes available."""
        return self.time + self.PERIOD

    @property
    def value(self) -> Decimal | None:
        """Primary scalar of the record: the page-view count."""
        return self.page_views

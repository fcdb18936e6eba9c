"""Record codecs: a JSON document form and an Arrow IPC binary form.

Both codecs keep decimals exact by carrying them as strings.
"""

from __future__ import annotations

import json
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Any

import pyarrow as pa

from wikiviews.core.exceptions import CodecError, WikiviewsError
from wikiviews.core.identifiers import parse_security_identifier
from wikiviews.core.models import Symbol, WikipediaUniverse


if TYPE_CHECKING:
    from collections.abc import Sequence

    from wikiviews.core.ports import IdentifierResolver


JSON_DATE_FORMAT = "%Y-%m-%d"

ARROW_SCHEMA = pa.schema(
    [
        pa.field("symbol", pa.string(), nullable=False),
        pa.field("ticker", pa.string(), nullable=False),
        pa.field("time", pa.timestamp("us"), nullable=False),
        pa.field("date", pa.date32(), nullable=False),
        pa.field("views", pa.string()),
        pa.field("pct_change_week", pa.string()),
        pa.field("pct_change_month", pa.string()),
    ]
)


def _decimal_to_str(value: Decimal | None) -> str | None:
    return None if value is None else str(value)


def _str_to_decimal(value: str | None) -> Decimal | None:
    return None if value is None else Decimal(value)


def _build_record(
    resolver: IdentifierResolver,
    sid: str,
    ticker: str,
    time: datetime,
    day: date,
    views: str | None,
    week: str | None,
    month: str | None,
) -> WikipediaUniverse:
    return WikipediaUniverse(
        symbol=Symbol(id=resolver(sid), value=ticker),
        time=time,
        date=day,
        page_views=_str_to_decimal(views),
        week_percent_change=_str_to_decimal(week),
        month_percent_change=_str_to_decimal(month),
    )


class JsonCodec:
    """Encodes records as a JSON array.

    Property names follow the vendor's published schema ("Views",
    "pct_change_week", ...). EndTime, Value and Period are derived and
    written for consumers only; decode() ignores them.
    """

    name = "json"

    def __init__(
        self, resolver: IdentifierResolver = parse_security_identifier
    ) -> None:
        self._resolver = resolver

    def to_dict(self, record: WikipediaUniverse) -> dict[str, Any]:
        """Convert one record to its JSON object form."""
        return {
            "Symbol": str(record.symbol.id),
            "Ticker": record.symbol.value,
            "Time": record.time.isoformat(),
            "EndTime": record.end_time.isoformat(),
            "Date": record.date.strftime(JSON_DATE_FORMAT),
            "Views": _decimal_to_str(record.page_views),
            "pct_change_week": _decimal_to_str(record.week_percent_change),
            "pct_change_month": _decimal_to_str(record.month_percent_change),
            "Value": _decimal_to_str(record.value),
            "Period": int(record.period.total_seconds()),
        }

    def from_dict(self, data: dict[str, Any]) -> WikipediaUniverse:
        """Build a record from its JSON object form.

        Raises:
            CodecError: If a required property is missing or malformed.
        """
        try:
            return _build_record(
                self._resolver,
                data["Symbol"],
                data["Ticker"],
                datetime.fromisoformat(data["Time"]),
                datetime.strptime(data["Date"], JSON_DATE_FORMAT).date(),
                data.get("Views"),
                data.get("pct_change_week"),
                data.get("pct_change_month"),
            )
        except (KeyError, TypeError, ValueError, InvalidOperation, WikiviewsError) as e:
            raise CodecError(f"Invalid JSON record: {e}", codec=self.name, cause=e) from e

    def encode(self, records: Sequence[WikipediaUniverse]) -> bytes:
        """Encode records as a UTF-8 JSON array."""
        return json.dumps([self.to_dict(r) for r in records], indent=2).encode()

    def decode(self, payload: bytes) -> list[WikipediaUniverse]:
        """Decode a JSON array produced by encode().

        Raises:
            CodecError: If the payload is not a JSON array of records.
        """
        try:
            data = json.loads(payload)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise CodecError(f"Invalid JSON payload: {e}", codec=self.name, cause=e) from e

        if not isinstance(data, list):
            raise CodecError("JSON payload must be an array", codec=self.name)

        return [self.from_dict(item) for item in data]


class ArrowCodec:
    """Encodes records as an Arrow IPC stream with a fixed schema."""

    name = "arrow"

    def __init__(
        self, resolver: IdentifierResolver = parse_security_identifier
    ) -> None:
        self._resolver = resolver

    def to_table(self, records: Sequence[WikipediaUniverse]) -> pa.Table:
        """Convert records to an Arrow table with ARROW_SCHEMA."""
        columns = {
            "symbol": [str(r.symbol.id) for r in records],
            "ticker": [r.symbol.value for r in records],
            "time": [r.time for r in records],
            "date": [r.date for r in records],
            "views": [_decimal_to_str(r.page_views) for r in records],
            "pct_change_week": [_decimal_to_str(r.week_percent_change) for r in records],
            "pct_change_month": [
                _decimal_to_str(r.month_percent_change) for r in records
            ],
        }
        return pa.Table.from_pydict(columns, schema=ARROW_SCHEMA)

    def encode(self, records: Sequence[WikipediaUniverse]) -> bytes:
        """Encode records as Arrow IPC stream bytes."""
        table = self.to_table(records)
        sink = pa.BufferOutputStream()
        with pa.ipc.new_stream(sink, ARROW_SCHEMA) as writer:
            writer.write_table(table)
        return sink.getvalue().to_pybytes()

    def decode(self, payload: bytes) -> list[WikipediaUniverse]:
        """Decode an Arrow IPC stream produced by encode().

        Raises:
            CodecError: If the payload is not a valid stream or has the wrong schema.
        """
        try:
            table = pa.ipc.open_stream(pa.py_buffer(payload)).read_all()
        except (pa.ArrowException, OSError) as e:
            raise CodecError(
                f"Invalid Arrow payload: {e}", codec=self.name, cause=e
            ) from e

        if not table.schema.equals(ARROW_SCHEMA):
            raise CodecError(
                f"Unexpected Arrow schema: {table.schema}", codec=self.name
            )

        try:
            return [
                _build_record(
                    self._resolver,
                    row["symbol"],
                    row["ticker"],
                    row["time"],
                    row["date"],
                    row["views"],
                    row["pct_change_week"],
                    row["pct_change_month"],
                )
                for row in table.to_pylist()
            ]
        except (ValueError, InvalidOperation, WikiviewsError) as e:
            raise CodecError(f"Invalid Arrow record: {e}", codec=self.name, cause=e) from e

"""Integration tests for UniverseReader over S3 and the storage router.

These tests verify the full read workflow with moto-backed S3: locating,
reading, decoding, date ranges, and date discovery.
"""

from __future__ import annotations

from datetime import date, datetime

import pytest

from wikiviews import UniverseReader, WikiviewsConfig, create_router
from wikiviews.core.exceptions import StorageNotFoundError


ROOT = "s3://test-bucket/quiver"
KEY = "quiver/alternative/quiver/wikipedia/universe/{:%Y%m%d}.csv"


def put_day(s3_client, day: date, lines: list[str]) -> None:
    body = "".join(f"{line}\n" for line in lines).encode()
    s3_client.put_object(Bucket="test-bucket", Key=KEY.format(day), Body=body)


@pytest.fixture
def reader(s3_client) -> UniverseReader:
    return UniverseReader(
        storage=create_router(s3_client=s3_client),
        config=WikiviewsConfig(data_folder=ROOT),
    )


@pytest.mark.e2e
@pytest.mark.storage
@pytest.mark.tra("UseCase.Read")
class TestReaderOverS3:
    """UniverseReader with an s3:// data folder."""

    def test_read_day(self, s3_client, reader, sample_lines) -> None:
        put_day(s3_client, date(2020, 3, 15), sample_lines)

        records = reader.read(date(2020, 3, 15))

        assert [r.symbol.value for r in records] == ["AAPL", "MSFT"]
        assert records[0].time == datetime(2020, 3, 14)

    def test_missing_day(self, reader) -> None:
        with pytest.raises(StorageNotFoundError):
            reader.read(date(2020, 3, 15))

    def test_read_range_and_dates(self, s3_client, reader, sample_lines) -> None:
        put_day(s3_client, date(2020, 3, 13), sample_lines)
        put_day(s3_client, date(2020, 3, 16), sample_lines[:1])

        result = reader.read_range(date(2020, 3, 12), date(2020, 3, 16))

        assert list(result) == [date(2020, 3, 13), date(2020, 3, 16)]
        assert len(result[date(2020, 3, 16)]) == 1
        assert reader.available_dates() == [date(2020, 3, 13), date(2020, 3, 16)]

    def test_local_and_s3_through_one_router(
        self, s3_client, write_universe, universe_dir, sample_lines
    ) -> None:
        """The same router serves local paths and s3:// URIs."""
        put_day(s3_client, date(2020, 3, 15), sample_lines)
        write_universe(date(2020, 3, 15), sample_lines[:1])
        router = create_router(s3_client=s3_client)

        remote = UniverseReader(router, WikiviewsConfig(data_folder=ROOT))
        local = UniverseReader(
            router, WikiviewsConfig(data_folder=str(universe_dir.parents[3]))
        )

        assert len(remote.read(date(2020, 3, 15))) == 2
        assert len(local.read(date(2020, 3, 15))) == 1

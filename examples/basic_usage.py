"""Basic single-day read example.

This example shows the simplest usage pattern: point a reader at a data
folder, locate the file for a date and decode its records.
"""

from datetime import date
from pathlib import Path

from wikiviews import FilesystemStorage, UniverseReader, WikiviewsConfig


# Option 1: Manual wiring (full control over adapters)
# Use this when you need a custom storage backend
reader = UniverseReader(
    storage=FilesystemStorage(),
    config=WikiviewsConfig(data_folder=str(Path("./data").resolve())),
)

# Option 2: Factory method (recommended for most cases)
# Auto-discovers project root, wires up RouterStorage (local paths and s3://)
# reader = UniverseReader.from_directory(data_folder="data")

# Where the 2020-03-15 batch lives: <data>/alternative/quiver/wikipedia/universe/20200315.csv
print(reader.source_for(date(2020, 3, 15)).source)

# Each record covers the day before the reference date
for record in reader.read(date(2020, 3, 15)):
    print(
        record.symbol,
        record.page_views,
        record.week_percent_change,
        record.month_percent_change,
        record.time,
        record.end_time,
    )

"""Reading a range of dates in parallel.

Dates without a universe file (weekends, holidays) are left out of the
result. With max_workers > 1 each date is read on its own thread.
"""

from datetime import date

from wikiviews import UniverseReader, configure_logging


configure_logging(level="DEBUG")

reader = UniverseReader.from_directory(
    data_folder="data",
    on_error="skip",  # log and drop bad lines instead of aborting the day
    max_workers=4,
)

batches = reader.read_range(date(2020, 3, 1), date(2020, 3, 31))
for day, records in batches.items():
    top = max(records, key=lambda r: r.page_views or 0, default=None)
    if top is not None:
        print(f"{day}: {len(records)} companies, most viewed {top.symbol}")

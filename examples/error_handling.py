"""Error handling patterns with recovery hints.

This example demonstrates how to handle decoding and storage errors and
use the recovery_hint property to provide actionable guidance.
"""

from datetime import date

from wikiviews import (
    IdentifierResolutionError,
    MalformedLineError,
    NumericParseError,
    ParseError,
    StorageNotFoundError,
    UniverseReader,
    WikipediaUniverse,
    WikiviewsError,
    decode,
)


reader = UniverseReader.from_directory(data_folder="data")


# Pattern 1: Decode single lines, reporting which stage failed
def decode_or_none(line: str, day: date) -> WikipediaUniverse | None:
    """Decode a line, printing a diagnostic on failure."""
    try:
        return decode(line, day)
    except MalformedLineError as e:
        print(f"Wrong field count ({e.field_count}): {e.line}")
    except NumericParseError as e:
        print(f"Bad number in {e.field}: {e.token!r}")
    except IdentifierResolutionError as e:
        print(f"Unknown identifier {e.token!r}")
        print(f"Hint: {e.recovery_hint}")
    return None


# Pattern 2: Handle days with no file
def read_or_empty(day: date) -> list[WikipediaUniverse]:
    """Read a day, returning an empty list when no file exists."""
    try:
        return reader.read(day)
    except StorageNotFoundError as e:
        print(f"No universe file: {e.source}")
        return []


# Pattern 3: Catch-all for any library error
def read_safe(day: date) -> list[WikipediaUniverse]:
    """Read a day with comprehensive error handling."""
    try:
        return reader.read(day)
    except ParseError as e:
        print(f"Bad line ({e.stage} stage): {e.line}")
        return []
    except WikiviewsError as e:
        print(f"Unexpected error: {e}")
        print(f"Hint: {e.recovery_hint}")
        return []


# Example usage
if __name__ == "__main__":
    decode_or_none("AAPL R735QTJ8XC9X,AAPL,lots,12.5,-3.2", date(2020, 3, 15))
    read_or_empty(date(1999, 1, 1))

"""Polars reader for universe CSV files.

Loads a headerless universe file into a polars DataFrame by wrapping
polars.read_csv().
"""

import codecs
import io
from pathlib import Path

import polars as pl

from wikiviews.adapters.readers.columns import COLUMNS, NUMERIC_COLUMNS


_SCHEMA = {column: pl.String for column in COLUMNS[:2]} | {
    column: pl.Float64 for column in NUMERIC_COLUMNS
}


class PolarsUniverseReader:
    """Reader that loads universe files into polars DataFrames."""

    def read(self, path: Path) -> pl.DataFrame:
        """Load a universe file using polars.read_csv().

        A leading UTF-8 byte order mark is dropped before parsing so it
        does not end up in the first sid.

        Args:
            path: Path to a local YYYYMMDD.csv universe file.

        Returns:
            A polars DataFrame with the universe columns.

        Raises:
            FileNotFoundError: If the file does not exist.
            polars.exceptions.ComputeError: If a numeric column cannot be parsed.
        """
        data = Path(path).read_bytes().removeprefix(codecs.BOM_UTF8)
        return pl.read_csv(
            io.BytesIO(data),
            has_header=False,
            schema=_SCHEMA,
        )

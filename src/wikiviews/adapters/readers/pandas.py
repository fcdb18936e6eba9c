"""Pandas reader adapter for universe CSV files.

Provides a Reader implementation that loads a headerless universe file
into a pandas DataFrame with named columns.
"""

from pathlib import Path

import pandas as pd

from wikiviews.adapters.readers.columns import COLUMNS, NUMERIC_COLUMNS


class PandasUniverseReader:
    """Reader adapter for universe files using pandas.

    Wraps pd.read_csv() to satisfy the Reader[pd.DataFrame] protocol.
    Numeric columns are floats; use the line decoder when exact decimals
    are needed.
    """

    def read(self, path: Path) -> pd.DataFrame:
        """Load a universe file into a pandas DataFrame.

        Args:
            path: Path to a local YYYYMMDD.csv universe file.

        Returns:
            DataFrame with columns sid, ticker, page_views,
            week_percent_change and month_percent_change.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If a numeric column holds non-numeric text.
        """
        return pd.read_csv(
            path,
            header=None,
            names=list(COLUMNS),
            usecols=range(len(COLUMNS)),
            dtype={"sid": "string", "ticker": "string"}
            | {column: "float64" for column in NUMERIC_COLUMNS},
            encoding="utf-8-sig",
        )

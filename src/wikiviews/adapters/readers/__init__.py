"""Reader adapters for loading whole universe files into DataFrames.

- Pandas: PandasUniverseReader
- Polars: PolarsUniverseReader

Importing this package imports both libraries; install the ``dataframes``
extra. The submodules can be imported on their own.
"""

from wikiviews.adapters.readers.pandas import PandasUniverseReader
from wikiviews.adapters.readers.polars import PolarsUniverseReader


__all__ = ["PandasUniverseReader", "PolarsUniverseReader"]

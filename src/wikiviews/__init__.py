"""wikiviews - Wikipedia page-view universe data for trading pipelines.

This library locates the daily Wikipedia page-view universe files, decodes
each line into a typed, time-stamped record, and reads whole days or date
ranges from local or S3 storage.

Example:
    >>> from datetime import date
    >>> from wikiviews import UniverseReader
    >>> reader = UniverseReader.from_directory(data_folder="/data")
    >>> reader.source_for(date(2020, 3, 15)).source
    '/data/alternative/quiver/wikipedia/universe/20200315.csv'
    >>> records = reader.read(date(2020, 3, 15))
"""

from loguru import logger

from wikiviews.adapters.executor import SynchronousExecutor, ThreadPoolExecutorAdapter
from wikiviews.adapters.storage import (
    FilesystemStorage,
    RouterStorage,
    S3Storage,
    create_router,
)
from wikiviews.config import WikiviewsConfig, find_project_root
from wikiviews.core.codecs import ArrowCodec, JsonCodec
from wikiviews.core.exceptions import (
    CodecError,
    ConfigurationError,
    IdentifierResolutionError,
    InvalidSecurityIdentifierError,
    MalformedLineError,
    NumericParseError,
    ParseError,
    StorageAccessError,
    StorageError,
    StorageNotFoundError,
    WikiviewsError,
)
from wikiviews.core.identifiers import (
    SecurityIdentifier,
    SecurityType,
    parse_security_identifier,
)
from wikiviews.core.models import (
    SubscriptionDataSource,
    Symbol,
    TransportMedium,
    WikipediaUniverse,
)
from wikiviews.core.ports import (
    Codec,
    ExecutorPort,
    IdentifierResolver,
    Reader,
    StoragePort,
)
from wikiviews.core.services import UniverseReader
from wikiviews.core.universe import decode, get_source, locate, reader
from wikiviews.logging import configure_logging, disable_logging


# Library stays quiet until the application calls configure_logging()
logger.disable("wikiviews")

__version__ = "0.1.0"

__all__ = [
    "ArrowCodec",
    "Codec",
    "CodecError",
    "ConfigurationError",
    "ExecutorPort",
    "FilesystemStorage",
    "IdentifierResolutionError",
    "IdentifierResolver",
    "InvalidSecurityIdentifierError",
    "JsonCodec",
    "MalformedLineError",
    "NumericParseError",
    "ParseError",
    "Reader",
    "RouterStorage",
    "S3Storage",
    "SecurityIdentifier",
    "SecurityType",
    "StorageAccessError",
    "StorageError",
    "StorageNotFoundError",
    "StoragePort",
    "SubscriptionDataSource",
    "Symbol",
    "SynchronousExecutor",
    "ThreadPoolExecutorAdapter",
    "TransportMedium",
    "UniverseReader",
    "WikipediaUniverse",
    "WikiviewsConfig",
    "WikiviewsError",
    "__version__",
    "configure_logging",
    "create_router",
    "decode",
    "disable_logging",
    "find_project_root",
    "get_source",
    "locate",
    "parse_security_identifier",
    "reader",
]

"""Core domain module for wikiviews.

This module contains the universe record, the locator and decoder, and
port definitions. It has no I/O dependencies and can be tested in isolation.
"""

from wikiviews.core.identifiers import SecurityIdentifier, parse_security_identifier
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
from wikiviews.core.universe import decode, get_source, locate, reader


__all__ = [
    "Codec",
    "ExecutorPort",
    "IdentifierResolver",
    "Reader",
    "SecurityIdentifier",
    "StoragePort",
    "SubscriptionDataSource",
    "Symbol",
    "TransportMedium",
    "WikipediaUniverse",
    "decode",
    "get_source",
    "locate",
    "parse_security_identifier",
    "reader",
]

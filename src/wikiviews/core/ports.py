"""Port interfaces for hexagonal architecture.

Ports define contracts that adapters must implement. The core domain
depends only on these protocols, never on concrete implementations.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable


if TYPE_CHECKING:
    from collections.abc import Sequence
    from concurrent.futures import Future
    from pathlib import Path

    from wikiviews.core.identifiers import SecurityIdentifier
    from wikiviews.core.models import WikipediaUniverse

T_co = TypeVar("T_co", covariant=True)

IdentifierResolver = Callable[[str], "SecurityIdentifier"]
"""Turns an identifier token into a SecurityIdentifier, raising on failure."""


@runtime_checkable
class StoragePort(Protocol):
    """Storage backend holding universe files (S3, local filesystem)."""

    def exists(self, source: str) -> bool:
        """Return True if a file exists at source."""
        ...

    def read_lines(self, source: str) -> list[str]:
        """Read a UTF-8 text file and return its lines without line endings.

        Raises:
            StorageNotFoundError: If the file does not exist.
            StorageAccessError: If access is denied.
        """
        ...

    def list(self, prefix: str, pattern: str | None = None) -> list[str]:
        """List files matching a prefix and optional glob pattern.

        Args:
            prefix: Base URI/path to search (e.g., "s3://bucket/universe/" or "/data/").
            pattern: Optional glob pattern for filtering (e.g., "*.csv").
                If None, returns all files under prefix.

        Returns:
            List of full URIs/paths for matching files, sorted alphabetically.

        Raises:
            StorageNotFoundError: If the prefix path does not exist.
        """
        ...


@runtime_checkable
class Reader(Protocol[T_co]):
    """Loads a local universe file into a typed object (e.g. a DataFrame)."""

    def read(self, path: Path) -> T_co:
        """Load the file at path."""
        ...


@runtime_checkable
class Codec(Protocol):
    """Serializes universe records to and from bytes."""

    name: str

    def encode(self, records: Sequence[WikipediaUniverse]) -> bytes:
        """Encode records into a payload."""
        ...

    def decode(self, payload: bytes) -> list[WikipediaUniverse]:
        """Decode a payload produced by encode().

        Raises:
            CodecError: If the payload is malformed.
        """
        ...


@runtime_checkable
class ExecutorPort(Protocol):
    """Executor for parallel task execution.

    Abstracts over concurrent.futures executors to allow dependency injection
    and testing. The core domain uses this protocol instead of directly
    importing ThreadPoolExecutor.
    """

    def submit(
        self, fn: Callable[..., object], *args: object, **kwargs: object
    ) -> Future[object]:  # type: ignore[name-defined, unused-ignore]
        """Submit a function for execution.

        Args:
            fn: Function to execute.
            *args: Positional arguments to pass to fn.
            **kwargs: Keyword arguments to pass to fn.

        Returns:
            Future representing the pending result.
        """
        ...

    def __enter__(self) -> ExecutorPort:
        """Enter context manager."""
        ...

    def __exit__(
        self, exc_type: object, exc_val: object, exc_tb: object
    ) -> object | None:
        """Exit context manager."""
        ...

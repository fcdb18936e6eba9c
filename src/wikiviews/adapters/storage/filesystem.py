"""Filesystem storage adapter for local universe files."""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from wikiviews.core.exceptions import (
    StorageAccessError,
    StorageError,
    StorageNotFoundError,
)


ENCODING = "utf-8-sig"


class FilesystemStorage:
    """Storage adapter for local filesystem operations.

    Implements StoragePort protocol for local file operations.
    This is the transport used for universe files in both live and
    backtest modes.
    """

    def exists(self, source: str) -> bool:
        """Return True if source is an existing regular file."""
        return Path(source).is_file()

    def read_lines(self, source: str) -> list[str]:
        """Read a text file and return its lines without line endings.

        Args:
            source: Path to file (absolute or relative).

        Returns:
            Lines of the file, in order.

        Raises:
            StorageNotFoundError: If file does not exist.
            StorageAccessError: If the file cannot be read due to permissions.
            StorageError: If source is a directory or the file is not valid UTF-8.
        """
        path = Path(source)
        try:
            text = path.read_text(encoding=ENCODING)
        except FileNotFoundError as e:
            raise StorageNotFoundError(
                f"File not found: {source}",
                source=source,
                cause=e,
            ) from e
        except IsADirectoryError as e:
            raise StorageError(
                f"Expected a file, found a directory: {source}",
                source=source,
                cause=e,
            ) from e
        except PermissionError as e:
            raise StorageAccessError(
                f"Permission denied: {source}",
                source=source,
                cause=e,
            ) from e
        except UnicodeDecodeError as e:
            raise StorageError(
                f"File is not valid UTF-8: {source}",
                source=source,
                cause=e,
            ) from e

        lines = text.splitlines()
        logger.debug("Read {} lines from {}", len(lines), source)
        return lines

    def list(self, prefix: str, pattern: str | None = None) -> list[str]:
        """List files matching a prefix directory and optional glob pattern.

        Args:
            prefix: Directory path to search.
            pattern: Optional glob pattern for filtering (e.g., "*.csv").
                Supports ** for recursive matching.

        Returns:
            List of full paths for matching files, sorted alphabetically.

        Raises:
            StorageNotFoundError: If the prefix directory does not exist.
            StorageAccessError: If the directory cannot be listed due to permissions.
        """
        base = Path(prefix)

        if not base.exists():
            raise StorageNotFoundError(
                f"Directory not found: {prefix}",
                source=prefix,
            )

        matches = base.glob(pattern) if pattern else base.iterdir()

        # Filter to files only and sort
        try:
            return sorted(str(p) for p in matches if p.is_file())
        except PermissionError as e:
            raise StorageAccessError(
                f"Permission denied: {prefix}",
                source=prefix,
                cause=e,
            ) from e

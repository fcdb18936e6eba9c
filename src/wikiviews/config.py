"""Configuration for wikiviews.

This module provides the configuration object carrying the data folder and
reading policy, plus project root discovery for resolving relative paths.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Self

from wikiviews.core.exceptions import ConfigurationError
from wikiviews.core.path_utils import parse_uri_scheme


ErrorPolicy = Literal["raise", "skip"]

ERROR_POLICIES: tuple[ErrorPolicy, ...] = ("raise", "skip")
DEFAULT_DATA_FOLDER = "data"


def find_project_root(start: Path | None = None) -> Path:
    """Find the project root directory by walking up from start directory.

    Searches for marker files in the following priority order:
    1. .wikiviews - Explicit project marker
    2. pyproject.toml - Python project root
    3. .git - Version control root

    Args:
        start: Directory to start searching from. If None, uses current directory.

    Returns:
        Path to project root directory. Returns start directory if no markers found.

    Example:
        >>> from wikiviews.config import find_project_root
        >>> root = find_project_root()
        >>> data_folder = root / "data"
    """
    if start is None:
        start = Path.cwd()

    markers = [".wikiviews", "pyproject.toml", ".git"]
    current = start.resolve()

    for parent in [current, *current.parents]:
        for marker in markers:
            if (parent / marker).exists():
                return parent

    return start.resolve()


@dataclass(frozen=True, slots=True)
class WikiviewsConfig:
    """Settings shared by the universe reader and the CLI.

    Attributes:
        data_folder: Storage root holding the "alternative/" tree. Either a
            local directory or a URI such as "s3://bucket/prefix".
        on_error: What to do with a line that fails to decode: "raise"
            aborts the batch, "skip" logs a warning and moves on.
        max_workers: Number of dates read in parallel by read_range().
    """

    data_folder: str
    on_error: ErrorPolicy = "raise"
    max_workers: int = 1

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if not self.data_folder:
            raise ConfigurationError("data_folder cannot be empty")
        scheme = parse_uri_scheme(self.data_folder)
        if scheme is not None and not self.data_folder.split("://", 1)[1].strip("/"):
            raise ConfigurationError(
                f"data_folder URI has no location after {scheme}://",
                hint="Give a bucket or path, e.g. s3://bucket/prefix",
            )
        if self.on_error not in ERROR_POLICIES:
            raise ConfigurationError(
                f"on_error must be one of {', '.join(ERROR_POLICIES)}, "
                f"got '{self.on_error}'"
            )
        if self.max_workers < 1:
            raise ConfigurationError("max_workers must be at least 1")

    @classmethod
    def from_directory(
        cls,
        directory: Path | None = None,
        data_folder: Path | str = DEFAULT_DATA_FOLDER,
        on_error: ErrorPolicy = "raise",
        max_workers: int = 1,
    ) -> Self:
        """Create a config with data_folder resolved against the project root.

        URIs and absolute paths are kept as given; relative paths are joined
        with the discovered project root.

        Args:
            directory: Start directory for root discovery (defaults to cwd).
            data_folder: Data folder relative to project root, absolute, or a URI.
            on_error: Error policy for undecodable lines.
            max_workers: Parallelism for date ranges.

        Returns:
            WikiviewsConfig with a resolved data_folder.
        """
        folder = str(data_folder)
        if parse_uri_scheme(folder) is None and not Path(folder).is_absolute():
            folder = str(find_project_root(directory) / folder)

        return cls(data_folder=folder, on_error=on_error, max_workers=max_workers)

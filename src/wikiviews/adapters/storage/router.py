"""RouterStorage composite adapter for URI scheme-based routing."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from wikiviews.core.exceptions import ConfigurationError
from wikiviews.core.path_utils import parse_uri_scheme, strip_file_scheme


if TYPE_CHECKING:
    from wikiviews.core.ports import StoragePort


class RouterStorage:
    """Storage adapter that routes to backends based on URI scheme.

    Implements StoragePort by delegating to scheme-specific adapters.
    """

    def __init__(self, backends: dict[str | None, StoragePort]) -> None:
        """Initialize with scheme-to-adapter mapping.

        Args:
            backends: Mapping of scheme (e.g., 's3', 'file') to StoragePort adapter.
                      Use None as key for default (local paths without scheme).
        """
        self._backends = backends

    def _get_backend_and_path(self, uri: str) -> tuple[StoragePort, str]:
        """Get the appropriate backend and normalized path for a URI.

        Raises:
            ConfigurationError: If no backend handles the URI scheme.
        """
        scheme = parse_uri_scheme(uri)
        if scheme in self._backends:
            # Strip file:// prefix for filesystem backend
            path = strip_file_scheme(uri) if scheme == "file" else uri
            return self._backends[scheme], path
        if scheme is None and None in self._backends:
            return self._backends[None], uri
        scheme_display = f"'{scheme}'" if scheme else "local path"
        raise ConfigurationError(
            f"No storage backend registered for scheme {scheme_display}: {uri}",
            hint="Use a local path, a file:// URI or an s3://bucket/prefix URI",
        )

    def exists(self, source: str) -> bool:
        """Check existence by delegating to appropriate backend."""
        backend, path = self._get_backend_and_path(source)
        return backend.exists(path)

    def read_lines(self, source: str) -> list[str]:
        """Read lines by delegating to appropriate backend."""
        backend, path = self._get_backend_and_path(source)
        return backend.read_lines(path)

    def list(self, prefix: str, pattern: str | None = None) -> list[str]:
        """List files by delegating to appropriate backend."""
        backend, path = self._get_backend_and_path(prefix)
        return backend.list(path, pattern)


def create_router(s3_client: Any | None = None) -> RouterStorage:
    """Create a RouterStorage with default backends.

    Args:
        s3_client: Optional boto3 S3 client. If not provided, creates default.

    Returns:
        RouterStorage configured with S3Storage and FilesystemStorage.
    """
    from wikiviews.adapters.storage import FilesystemStorage, S3Storage

    fs = FilesystemStorage()
    return RouterStorage(
        backends={
            "s3": S3Storage(client=s3_client),
            "file": fs,
            None: fs,
        }
    )

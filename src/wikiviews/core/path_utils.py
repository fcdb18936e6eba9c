"""Path and URI helpers shared by the locator and the storage router."""

from __future__ import annotations

from pathlib import Path


def parse_uri_scheme(uri: str) -> str | None:
    """Extract the URI scheme from a source string.

    Args:
        uri: Source URI or file path.

    Returns:
        The scheme (e.g., 's3', 'file') or None for local paths.
    """
    if "://" in uri:
        scheme = uri.split("://", 1)[0]
        # Avoid confusing Windows drive letters (C:) with schemes
        if len(scheme) > 1:
            return scheme.lower()
    return None


def strip_file_scheme(uri: str) -> str:
    """Strip file:// prefix from URI, returning plain path.

    Args:
        uri: URI that may have file:// prefix.

    Returns:
        The path without file:// prefix.
    """
    if uri.startswith("file://"):
        return uri[7:]  # len("file://") == 7
    return uri


def join_source(root: str | Path, *parts: str) -> str:
    """Join path segments onto a storage root.

    URI roots (s3://bucket/prefix) are joined with "/"; local roots use
    pathlib semantics.

    Args:
        root: Local directory or URI of the storage root.
        *parts: Path segments to append.

    Returns:
        The joined path or URI as a string.
    """
    root_str = str(root)
    if parse_uri_scheme(root_str) is not None:
        return "/".join([root_str.rstrip("/"), *parts])
    return str(Path(root_str).joinpath(*parts))

"""S3 storage adapter using boto3."""

from __future__ import annotations

import fnmatch
from pathlib import PurePosixPath
from typing import TYPE_CHECKING

import boto3
from botocore.exceptions import ClientError
from loguru import logger

from wikiviews.core.exceptions import (
    ConfigurationError,
    StorageAccessError,
    StorageError,
    StorageNotFoundError,
)


if TYPE_CHECKING:
    from mypy_boto3_s3 import S3Client


ENCODING = "utf-8-sig"

_NOT_FOUND_CODES = ("404", "NoSuchKey", "NoSuchBucket")
_ACCESS_DENIED_CODES = ("403", "AccessDenied")


class S3Storage:
    """Storage adapter for S3 operations.

    Implements StoragePort protocol for AWS S3, for data folders
    configured as "s3://bucket/prefix".
    """

    def __init__(self, client: S3Client | None = None) -> None:
        """Initialize S3 storage.

        Args:
            client: Optional boto3 S3 client. If not provided, creates a default client.
        """
        self._client = client or boto3.client("s3")

    def exists(self, source: str) -> bool:
        """Return True if an object exists at the S3 URI.

        Raises:
            StorageAccessError: If access is denied.
            StorageError: For other S3 errors.
        """
        bucket, key = self._parse_s3_uri(source)
        try:
            self._client.head_object(Bucket=bucket, Key=key)
        except ClientError as e:
            error = self._translate_client_error(e, source)
            if isinstance(error, StorageNotFoundError):
                return False
            raise error from e
        return True

    def read_lines(self, source: str) -> list[str]:
        """Download an object and return its lines without line endings.

        Args:
            source: S3 URI (s3://bucket/key).

        Returns:
            Lines of the object, in order.

        Raises:
            StorageNotFoundError: If object does not exist.
            StorageAccessError: If access is denied.
            StorageError: For other S3 errors or non UTF-8 content.
        """
        bucket, key = self._parse_s3_uri(source)

        try:
            response = self._client.get_object(Bucket=bucket, Key=key)
        except ClientError as e:
            raise self._translate_client_error(e, source) from e

        body = response["Body"].read()
        try:
            text = body.decode(ENCODING)
        except UnicodeDecodeError as e:
            raise StorageError(
                f"Object is not valid UTF-8: {source}",
                source=source,
                cause=e,
            ) from e

        lines = text.splitlines()
        logger.debug("Read {} lines from {}", len(lines), source)
        return lines

    def list(self, prefix: str, pattern: str | None = None) -> list[str]:
        """List S3 objects matching a prefix and optional glob pattern.

        Args:
            prefix: S3 URI prefix (e.g., "s3://bucket/path/").
            pattern: Optional glob pattern for filtering (e.g., "*.csv").
                Matched against the object's filename.

        Returns:
            List of full S3 URIs for matching objects, sorted alphabetically.
        """
        bucket, key_prefix = self._parse_s3_uri_prefix(prefix)
        if key_prefix and not key_prefix.endswith("/"):
            key_prefix += "/"

        paginator = self._client.get_paginator("list_objects_v2")
        results: list[str] = []

        try:
            for page in paginator.paginate(Bucket=bucket, Prefix=key_prefix):
                for obj in page.get("Contents", []):
                    key = obj["Key"]
                    filename = PurePosixPath(key).name
                    if pattern is None or fnmatch.fnmatch(
                        filename, pattern.split("/")[-1]
                    ):
                        results.append(f"s3://{bucket}/{key}")
        except ClientError as e:
            raise self._translate_client_error(e, prefix) from e

        return sorted(results)

    def _parse_s3_uri_prefix(self, uri: str) -> tuple[str, str]:
        """Parse an S3 URI prefix into bucket and key prefix.

        Unlike _parse_s3_uri, this allows empty key (bucket-level prefix).

        Raises:
            ConfigurationError: If URI is not a valid S3 URI.
        """
        if uri[:5].lower() != "s3://":
            raise _invalid_uri(uri)

        path = uri[5:]  # Remove s3://
        parts = path.split("/", 1)
        bucket = parts[0]
        key_prefix = parts[1] if len(parts) > 1 else ""
        if not bucket:
            raise _invalid_uri(uri, "missing bucket")

        return bucket, key_prefix

    def _parse_s3_uri(self, uri: str) -> tuple[str, str]:
        """Parse an S3 URI into bucket and key.

        Args:
            uri: S3 URI in format s3://bucket/key.

        Returns:
            Tuple of (bucket, key).

        Raises:
            ConfigurationError: If URI is not a valid S3 URI.
        """
        bucket, key = self._parse_s3_uri_prefix(uri)
        if not key:
            raise _invalid_uri(uri, "missing key")
        return bucket, key

    def _translate_client_error(self, error: ClientError, source: str) -> StorageError:
        """Translate botocore ClientError to domain exception.

        Args:
            error: The botocore ClientError.
            source: The source URI for context.

        Returns:
            Appropriate StorageError subclass.
        """
        code = error.response.get("Error", {}).get("Code", "")

        if code in _NOT_FOUND_CODES:
            return StorageNotFoundError(
                f"Object not found: {source}",
                source=source,
                cause=error,
            )

        if code in _ACCESS_DENIED_CODES:
            return StorageAccessError(
                f"Access denied: {source}",
                source=source,
                cause=error,
            )

        return StorageError(
            f"S3 error ({code}): {error}",
            source=source,
            cause=error,
        )


def _invalid_uri(uri: str, reason: str | None = None) -> ConfigurationError:
    detail = f" ({reason})" if reason else ""
    return ConfigurationError(
        f"Invalid S3 URI{detail}: {uri}",
        hint="S3 data folders look like s3://bucket/prefix",
    )

"""Storage backend adapters."""

from wikiviews.adapters.storage.filesystem import FilesystemStorage
from wikiviews.adapters.storage.router import RouterStorage, create_router
from wikiviews.adapters.storage.s3 import S3Storage


__all__ = ["FilesystemStorage", "RouterStorage", "S3Storage", "create_router"]

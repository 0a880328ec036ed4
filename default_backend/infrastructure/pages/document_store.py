"""
Adapter: Error documents on the local filesystem.

Implements ErrorDocumentStorePort.
"""

from typing import BinaryIO

from default_backend.domain.pages.ports import ErrorDocumentStorePort


class FileSystemDocumentStore(ErrorDocumentStorePort):
    """Opens error documents straight from disk, no caching."""

    def open(self, path: str) -> BinaryIO:
        return open(path, "rb")

"""
Port interfaces (ABCs) for the error pages bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO


class ExtensionLookupPort(ABC):
    """Port for mapping a MIME type to its registered file extensions."""

    @abstractmethod
    def extensions_for(self, media_type: str) -> list[str]:
        """Return the extensions registered for a media type.

        The first entry is the preferred extension. An unknown type
        yields an empty list.

        Raises:
            InvalidMediaTypeError: If ``media_type`` cannot be parsed.
        """
        raise NotImplementedError


class ErrorDocumentStorePort(ABC):
    """Port for reading error documents."""

    @abstractmethod
    def open(self, path: str) -> BinaryIO:
        """Open the document at ``path`` for binary reading.

        The caller owns the returned handle and must close it.

        Raises:
            OSError: If the document cannot be opened.
        """
        raise NotImplementedError

"""
Domain entities for the error pages bounded context.

Entities are request-scoped values. They contain no framework
imports and no IO operations.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ResolvedErrorPage:
    """Everything derived from one request to locate its error document.

    Attributes:
        format: MIME type the client asked for, e.g. ``text/html``.
        extension: File extension for the format, always dot-prefixed.
        status_code: Status code written on the response status line.
        base_path: Directory holding the error documents.
        file_path: Full path of the error document, ``{base}/{code}{ext}``.
    """

    format: str
    extension: str
    status_code: int
    base_path: str
    file_path: str

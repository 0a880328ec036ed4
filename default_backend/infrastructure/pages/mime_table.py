"""
Adapter: Embedded MIME type to extension table.

Implements ExtensionLookupPort with a fixed table so the extension picked
for a format never depends on the host's MIME database. The preferred
extension of each type is listed first.
"""

import re
from typing import Mapping, Optional

from default_backend.domain.pages.errors import InvalidMediaTypeError
from default_backend.domain.pages.ports import ExtensionLookupPort

# RFC 7231 token characters for the type and subtype parts.
_TOKEN = r"[!#$%&'*+.^_`|~0-9A-Za-z-]+"
_MEDIA_TYPE_PATTERN = re.compile(rf"{_TOKEN}/{_TOKEN}")

DEFAULT_MIME_EXTENSIONS: dict[str, tuple[str, ...]] = {
    "text/html": (".html", ".htm"),
    "text/plain": (".txt", ".text", ".log"),
    "text/css": (".css",),
    "text/csv": (".csv",),
    "text/xml": (".xml",),
    "text/markdown": (".md", ".markdown"),
    "text/javascript": (".js", ".mjs"),
    "application/javascript": (".js", ".mjs"),
    "application/json": (".json",),
    "application/problem+json": (".json",),
    "application/xml": (".xml",),
    "application/xhtml+xml": (".xhtml", ".xht"),
    "application/yaml": (".yaml", ".yml"),
    "application/pdf": (".pdf",),
    "application/wasm": (".wasm",),
    "application/octet-stream": (".bin",),
    "image/png": (".png",),
    "image/jpeg": (".jpg", ".jpeg", ".jpe"),
    "image/gif": (".gif",),
    "image/webp": (".webp",),
    "image/avif": (".avif",),
    "image/svg+xml": (".svg",),
    "image/x-icon": (".ico",),
    "font/woff": (".woff",),
    "font/woff2": (".woff2",),
}


class MimeTableExtensionLookup(ExtensionLookupPort):
    """Looks up extensions in an in-memory table.

    Media type parameters (``; charset=utf-8``) are ignored and matching
    is case-insensitive.
    """

    def __init__(self, table: Optional[Mapping[str, tuple[str, ...]]] = None) -> None:
        source = DEFAULT_MIME_EXTENSIONS if table is None else table
        self._table = {key.lower(): tuple(value) for key, value in source.items()}

    def extensions_for(self, media_type: str) -> list[str]:
        essence = media_type.split(";", 1)[0].strip()
        if not _MEDIA_TYPE_PATTERN.fullmatch(essence):
            raise InvalidMediaTypeError(media_type)
        return list(self._table.get(essence.lower(), ()))

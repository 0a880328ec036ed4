"""
Streaming response for error documents.

The status line is sent before the document is opened, so a client
always sees the resolved status code. A missing document is answered
with a generic not-found body under that same status.
"""

import logging
from typing import Iterator, Mapping

from starlette.responses import StreamingResponse

from default_backend.domain.pages.entities import ResolvedErrorPage
from default_backend.domain.pages.ports import ErrorDocumentStorePort

logger = logging.getLogger(__name__)

# Request headers copied onto the response in debug mode, in this order.
MIRRORED_HEADERS = (
    "X-Format",
    "X-Code",
    "Content-Type",
    "X-Original-URI",
    "X-Namespace",
    "X-Ingress-Name",
    "X-Service-Name",
    "X-Service-Port",
    "X-Request-ID",
)

NOT_FOUND_BODY = b"404 page not found\n"
CHUNK_SIZE = 64 * 1024


def mirror_headers(request_headers: Mapping[str, str]) -> dict[str, str]:
    """Copy the allow-listed headers, missing ones as empty strings."""
    return {name: request_headers.get(name, "") for name in MIRRORED_HEADERS}


def iter_error_document(
    page: ResolvedErrorPage, store: ErrorDocumentStorePort
) -> Iterator[bytes]:
    """Yield the document bytes, or the not-found body if it cannot be opened.

    Runs after the status line is committed. The file handle is closed on
    every exit path.
    """
    try:
        handle = store.open(page.file_path)
    except OSError as exc:
        logger.error("error opening file %s", exc)
        yield NOT_FOUND_BODY
        return

    logger.info(
        "serving custom error for code %d and format %s and file %s",
        page.status_code,
        page.format,
        page.file_path,
    )
    with handle:
        try:
            while chunk := handle.read(CHUNK_SIZE):
                yield chunk
        except OSError as exc:
            # Headers are already sent, the body is simply cut short.
            logger.error("error streaming file %s: %s", page.file_path, exc)


class ErrorPageResponse(StreamingResponse):
    """Streams the resolved error document under the resolved status code."""

    def __init__(
        self,
        page: ResolvedErrorPage,
        store: ErrorDocumentStorePort,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(
            iter_error_document(page, store),
            status_code=page.status_code,
            headers=headers,
        )
        self.page = page

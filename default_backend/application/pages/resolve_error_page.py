"""
Use case: Resolve the error document answering a proxied request.

Input: ResolveErrorPageQuery (request headers, configured base path)
Output: ResolvedErrorPage
Side effects: None.
Failure cases: None. Every derivation falls back to a default.
"""

import logging

from default_backend.application.pages.dtos import ResolveErrorPageQuery
from default_backend.domain.pages.entities import ResolvedErrorPage
from default_backend.domain.pages.ports import ExtensionLookupPort
from default_backend.domain.pages.resolver import (
    resolve_base_path,
    resolve_extension,
    resolve_file_path,
    resolve_format,
    resolve_status_code,
)

logger = logging.getLogger(__name__)


class ResolveErrorPageUseCase:
    """Derives format, extension, status code and file path for a request.

    Delegates the MIME type to extension mapping to the
    ExtensionLookupPort so the table is swappable.
    """

    def __init__(self, extension_lookup: ExtensionLookupPort) -> None:
        self._extension_lookup = extension_lookup

    def execute(self, query: ResolveErrorPageQuery) -> ResolvedErrorPage:
        """Run the resolution.

        Args:
            query: Request headers and the configured base path.

        Returns:
            The resolved error page for this request.
        """
        media_type = resolve_format(query.headers)
        extension = resolve_extension(media_type, self._extension_lookup)
        status_code = resolve_status_code(query.headers)
        base_path = resolve_base_path(query.configured_base_path)
        file_path = resolve_file_path(base_path, status_code, extension)

        logger.debug(
            "Resolved code=%d format=%s file=%s", status_code, media_type, file_path
        )
        return ResolvedErrorPage(
            format=media_type,
            extension=extension,
            status_code=status_code,
            base_path=base_path,
            file_path=file_path,
        )

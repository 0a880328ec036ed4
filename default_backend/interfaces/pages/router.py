"""
Error responder router.

Catches every path not matched by another router. Resolves the error
document from the proxy headers and streams it back. No business logic
beyond wiring request, settings and use case.
"""

import logging

from fastapi import APIRouter, Depends, Request

from default_backend.application.pages.dtos import ResolveErrorPageQuery
from default_backend.application.pages.resolve_error_page import (
    ResolveErrorPageUseCase,
)
from default_backend.core.config import Settings
from default_backend.domain.pages.ports import ErrorDocumentStorePort
from default_backend.interfaces import AnyMethodRoute
from default_backend.interfaces.pages.dependencies import (
    get_document_store,
    get_resolve_error_page_use_case,
    get_settings,
)
from default_backend.interfaces.pages.responses import (
    ErrorPageResponse,
    mirror_headers,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["error-pages"], route_class=AnyMethodRoute)


@router.api_route("/{full_path:path}", include_in_schema=False)
def serve_error_page(
    full_path: str,
    request: Request,
    settings: Settings = Depends(get_settings),
    use_case: ResolveErrorPageUseCase = Depends(get_resolve_error_page_use_case),
    store: ErrorDocumentStorePort = Depends(get_document_store),
) -> ErrorPageResponse:
    """Answer a proxied request with its custom error document."""
    headers = None
    if settings.debug:
        logger.debug("Adding headers")
        headers = mirror_headers(request.headers)

    page = use_case.execute(
        ResolveErrorPageQuery(
            headers=request.headers,
            configured_base_path=settings.error_files_path,
        )
    )
    logger.debug("Error page for /%s resolved to %s", full_path, page.file_path)
    return ErrorPageResponse(page, store, headers=headers)

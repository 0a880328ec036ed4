"""
Dependency injection for the error pages bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into the use case and expose the start-up settings.
"""

from fastapi import Request

from default_backend.application.pages.resolve_error_page import (
    ResolveErrorPageUseCase,
)
from default_backend.core.config import Settings
from default_backend.domain.pages.ports import ErrorDocumentStorePort
from default_backend.infrastructure.pages.document_store import (
    FileSystemDocumentStore,
)
from default_backend.infrastructure.pages.mime_table import MimeTableExtensionLookup

_extension_lookup = MimeTableExtensionLookup()
_document_store = FileSystemDocumentStore()


def get_settings(request: Request) -> Settings:
    """Return the settings the application was created with."""
    return request.app.state.settings


def get_resolve_error_page_use_case() -> ResolveErrorPageUseCase:
    """Build ResolveErrorPageUseCase with the embedded MIME table."""
    return ResolveErrorPageUseCase(extension_lookup=_extension_lookup)


def get_document_store() -> ErrorDocumentStorePort:
    """Return the filesystem error document store."""
    return _document_store

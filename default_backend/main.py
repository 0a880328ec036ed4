"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health first, then the catch-all error responder)
- Error handlers (centralized failure-to-HTTP mapping)
- Logging configuration

No business logic belongs here.
"""

from typing import Optional

from fastapi import FastAPI

from default_backend.core.config import Settings, load_settings
from default_backend.interfaces.health import router as health_router
from default_backend.interfaces.pages.router import router as pages_router
from default_backend.shared.errors.handlers import register_error_handlers
from default_backend.shared.logging import configure_logging


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the service. Every path except
    ``/health`` belongs to the error responder, so no documentation
    routes are mounted.

    Args:
        settings: Start-up configuration. Loaded from the environment
            (and ``.env`` in debug mode) when omitted.

    Returns:
        A fully configured FastAPI application instance.

    Raises:
        EnvironmentLoadError: If settings are loaded here in debug mode
            and the .env file cannot be read.
    """
    if settings is None:
        settings = load_settings()
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(pages_router)

    return app

"""
Health check router.

Provides a liveness/readiness endpoint for the orchestrator.
No header inspection, no side effects, empty body.
"""

from fastapi import APIRouter, Response

from default_backend.interfaces import AnyMethodRoute

router = APIRouter(tags=["health"], route_class=AnyMethodRoute)


@router.api_route("/health", include_in_schema=False)
def health_check() -> Response:
    """Return 200 with an empty body."""
    return Response(status_code=200)

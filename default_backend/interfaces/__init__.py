"""HTTP interface layer: FastAPI routers and responses."""

from fastapi.routing import APIRoute
from starlette.routing import Match
from starlette.types import Receive, Scope, Send


class AnyMethodRoute(APIRoute):
    """APIRoute that answers every HTTP method, standard or not.

    The proxy forwards whatever method the client used (TRACE, PURGE,
    PROPFIND, ...). A path match is a full match and never turns into
    a 405.
    """

    def matches(self, scope: Scope) -> tuple[Match, Scope]:
        match, child_scope = super().matches(scope)
        # PARTIAL means the path matched and only the method did not
        if match is Match.PARTIAL:
            return Match.FULL, child_scope
        return match, child_scope

    async def handle(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self.app(scope, receive, send)

"""
Route class for method fallbacks.

Starlette answers a request whose path matches but whose method does
not with its own JSON 405, before any of our dependencies run.
``AnyMethodRoute`` claims every method for its path instead, so a
fallback endpoint registered last on a router receives any verb the
earlier routes did not, custom ones included, and goes through the
router's dependencies (request logging, id parsing) like any other
request.
"""

from fastapi.routing import APIRoute
from starlette.routing import Match
from starlette.types import Receive, Scope, Send


class AnyMethodRoute(APIRoute):
    """APIRoute matching its path for every HTTP method."""

    def matches(self, scope: Scope):
        match, child_scope = super().matches(scope)
        # PARTIAL only ever means "path matched, method did not".
        if match == Match.PARTIAL:
            match = Match.FULL
        return match, child_scope

    async def handle(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self.app(scope, receive, send)

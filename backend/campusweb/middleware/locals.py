"""
Campus Web — Response Locals Middleware
=========================================

What:  Installs a fresh ResponseContext on every request before routing.
How:   Calls LocalsComposer.compose(request), which attaches the context to
       `request.state.response_context`; the handler chain then runs with it.
Who:   Registered once in create_app(), inside SessionMiddleware (so the
       session is readable) and outside every router.

Request flow:
    SessionMiddleware → ResponseLocalsMiddleware → router
        → route-group dependencies (section_assets) → endpoint → render_page()

Starlette keeps request.state in the ASGI scope, so the context set here is
the same object the endpoint and its dependencies see.
"""

from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from campusweb.presentation.context import LocalsComposer


class ResponseLocalsMiddleware(BaseHTTPMiddleware):
    """
    Runs the locals composer exactly once per request.

    Args:
        app:      The wrapped ASGI application.
        composer: Composer to use; defaults to a production LocalsComposer.
    """

    def __init__(self, app: ASGIApp, composer: Optional[LocalsComposer] = None):
        super().__init__(app)
        self.composer = composer or LocalsComposer()

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        self.composer.compose(request)
        return await call_next(request)

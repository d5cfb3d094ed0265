"""
Auth handler protocol and the middleware that consults it.

The OAuth flow itself (login redirect, callback, token storage, logout)
lives outside this package. It is injected into the app as an AuthHandler
that either answers a request or lets it through to the router.
"""

from collections.abc import Awaitable, Callable, Iterable
from typing import Protocol, runtime_checkable

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from xaffiliates.logging import get_logger, request_context

_log = get_logger("auth")


@runtime_checkable
class AuthHandler(Protocol):
    """Protocol for an OAuth collaborator."""

    async def handle(self, request: Request) -> Response | None:
        """Return a response for auth routes, or None to pass the request on."""
        ...


class PassthroughAuth:
    """Handler that never claims a request."""

    async def handle(self, request: Request) -> Response | None:
        return None


class PathAuth:
    """
    Routes a fixed set of paths to an async endpoint.

    Example:
        auth = PathAuth(["/login", "/callback", "/logout"], oauth_endpoint)
    """

    def __init__(
        self,
        paths: Iterable[str],
        endpoint: Callable[[Request], Awaitable[Response]],
    ):
        self.paths = frozenset(paths)
        self.endpoint = endpoint

    async def handle(self, request: Request) -> Response | None:
        if request.url.path not in self.paths:
            return None
        return await self.endpoint(request)


class AuthMiddleware(BaseHTTPMiddleware):
    """Gives the auth handler first look at every request."""

    def __init__(self, app: ASGIApp, handler: AuthHandler):
        super().__init__(app)
        self.handler = handler

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        with request_context(request):
            response = await self.handler.handle(request)
            if response is not None:
                _log.debug("auth_handled", status=response.status_code)
                return response
            return await call_next(request)

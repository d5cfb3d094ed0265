"""FastAPI web app serving the landing page and affiliates dashboard."""

from collections.abc import Callable

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse

from xaffiliates import __version__
from xaffiliates.auth import AuthHandler, AuthMiddleware, PassthroughAuth
from xaffiliates.config import AffiliatesConfig
from xaffiliates.core.orchestrator import DashboardService
from xaffiliates.core.renderer import render_dashboard, render_error, render_home
from xaffiliates.logging import configure_logging, get_logger

ClientFactory = Callable[[AffiliatesConfig], httpx.AsyncClient]

_log = get_logger("api")


def extract_token(
    request: Request,
    cookie_name: str = "x_access_token",
    query_param: str = "apiKey",
) -> str | None:
    """
    Find the user's access token on a request.

    The session cookie wins over the query parameter; empty values are
    treated as missing.

    Args:
        request: Incoming request
        cookie_name: Name of the session cookie
        query_param: Name of the query parameter used by API callers

    Returns:
        Token string or None
    """
    return request.cookies.get(cookie_name) or request.query_params.get(query_param) or None


def create_app(
    config: AffiliatesConfig | None = None,
    auth: AuthHandler | None = None,
    client_factory: ClientFactory | None = None,
) -> FastAPI:
    """
    Build the web app.

    Args:
        config: AffiliatesConfig instance, uses defaults if None
        auth: OAuth collaborator consulted before routing
        client_factory: Builds the X API client per request; the service
            creates its own from config when None

    Returns:
        Configured FastAPI application
    """
    config = config or AffiliatesConfig()
    configure_logging(config)

    app = FastAPI(
        title="xaffiliates",
        description="Find the X accounts affiliated with your organization",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.config = config
    app.add_middleware(AuthMiddleware, handler=auth or PassthroughAuth())

    def _token(request: Request) -> str | None:
        return extract_token(request, config.cookie_name, config.token_query_param)

    @app.get("/", response_class=HTMLResponse)
    async def home(request: Request):
        """Landing page."""
        return HTMLResponse(render_home(_token(request) is not None, config.login_path))

    @app.get("/dashboard", response_class=HTMLResponse)
    async def dashboard(request: Request):
        """Profile, affiliation and team members of the signed-in user."""
        token = _token(request)
        if token is None:
            return RedirectResponse(config.login_path, status_code=302)

        client = client_factory(config) if client_factory else None
        try:
            async with DashboardService(config, client=client) as service:
                data = await service.load(token)
            return HTMLResponse(render_dashboard(data))
        except Exception as e:
            _log.exception("dashboard_failed", error=str(e))
            return HTMLResponse(render_error(str(e)), status_code=500)
        finally:
            if client is not None:
                await client.aclose()

    @app.api_route(
        "/{path:path}",
        methods=["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"],
        include_in_schema=False,
    )
    async def not_found(path: str):
        return PlainTextResponse("Not Found", status_code=404)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=app.state.config.host, port=app.state.config.port)

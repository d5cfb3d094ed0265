"""
Structlog configuration for xaffiliates.

Events emitted by the app:
    profile_resolved     own profile fetched (username, org_user_id)
    affiliates_page      one affiliates page received (debug)
    affiliates_complete  all pages collected (count)
    affiliates_failed    listing failed, dashboard shows no team members
    upstream_error       X API answered with a non-success status
    dashboard_failed     dashboard rendered as an error page
    auth_handled         auth handler answered the request (debug)

Inside a request every event also carries ``method`` and ``path``.
"""

import logging
import sys
from contextlib import AbstractContextManager

import structlog
from starlette.requests import Request

from xaffiliates.config import AffiliatesConfig, LogFormat


def configure_logging(config: AffiliatesConfig | None = None) -> None:
    """
    Configure structlog for console (development) or JSON (production) output.

    Args:
        config: AffiliatesConfig instance, uses defaults if None
    """
    if config is None:
        config = AffiliatesConfig()

    log_level = getattr(logging, config.log_level.upper(), logging.INFO)
    # uvicorn and httpx log through the standard library
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if config.log_format == LogFormat.JSON:
        processors.extend([
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ])
    else:
        processors.extend([
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(colors=True),
        ])

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def request_context(request: Request) -> AbstractContextManager:
    """
    Bind the request's method and path to every event logged inside it.

    Example:
        with request_context(request):
            response = await call_next(request)
    """
    return structlog.contextvars.bound_contextvars(
        method=request.method,
        path=request.url.path,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """
    Get a structlog logger for one component.

    Args:
        name: Component name, logged as ``logger_name``

    Returns:
        Lazy structlog logger
    """
    # Stays a lazy proxy until first use, so configure_logging still applies.
    if name:
        return structlog.get_logger(logger_name=name)
    return structlog.get_logger()

"""Structured logging helpers."""

from xaffiliates.logging.setup import configure_logging, get_logger, request_context

__all__ = ["configure_logging", "get_logger", "request_context"]

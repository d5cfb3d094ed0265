"""Pluggable OAuth handler interface."""

from xaffiliates.auth.handler import AuthHandler, AuthMiddleware, PassthroughAuth, PathAuth

__all__ = ["AuthHandler", "AuthMiddleware", "PassthroughAuth", "PathAuth"]

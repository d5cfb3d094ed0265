"""Custom exception hierarchy for xaffiliates."""


class XAffiliatesError(Exception):
    """Base exception for all xaffiliates errors."""


class UpstreamError(XAffiliatesError):
    """X API answered with a non-success status."""

    def __init__(self, message: str, status_code: int, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ResponseFormatError(XAffiliatesError):
    """X API answered successfully but the body is not what was expected."""


class PaginationLimitError(XAffiliatesError):
    """Affiliate listing returned more pages than allowed."""

"""Bearer-authenticated JSON fetcher for the X v2 API."""

from typing import Any

import httpx

from xaffiliates.exceptions import ResponseFormatError, UpstreamError
from xaffiliates.logging import get_logger

_log = get_logger("fetcher")

USER_FIELDS = "affiliation,profile_image_url,description,public_metrics"
AFFILIATION_EXPANSION = "affiliation.user_id"


def bearer_headers(token: str) -> dict[str, str]:
    """Authorization header for a user access token."""
    return {"Authorization": f"Bearer {token}"}


async def fetch_json(
    client: httpx.AsyncClient,
    path: str,
    token: str,
    params: dict[str, str] | None = None,
    error_prefix: str = "Request failed",
) -> dict[str, Any]:
    """
    GET a JSON document from the X API.

    Args:
        client: AsyncClient configured with the API base URL
        path: Endpoint path, e.g. "/2/users/me"
        token: Bearer access token
        params: Query parameters
        error_prefix: Leading text of the error message on failure

    Returns:
        Decoded JSON body

    Raises:
        UpstreamError: If the API responds with a non-success status
        ResponseFormatError: If the body is not JSON
    """
    response = await client.get(path, params=params, headers=bearer_headers(token))

    if not response.is_success:
        body = response.text
        _log.warning("upstream_error", path=path, status=response.status_code)
        raise UpstreamError(
            f"{error_prefix}: {response.status_code} {body}",
            status_code=response.status_code,
            body=body,
        )

    try:
        return response.json()
    except ValueError as e:
        raise ResponseFormatError(f"{error_prefix}: response from {path} is not JSON") from e

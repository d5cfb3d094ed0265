"""Resolves the authenticated user's profile and organization affiliation."""

import httpx

from xaffiliates.core.fetcher import AFFILIATION_EXPANSION, USER_FIELDS, fetch_json
from xaffiliates.exceptions import ResponseFormatError
from xaffiliates.logging import get_logger
from xaffiliates.models.profile import UserProfile

_log = get_logger("resolver")


async def resolve_profile(
    client: httpx.AsyncClient,
    token: str,
) -> tuple[UserProfile, str | None]:
    """
    Fetch the caller's own profile with affiliation details.

    Args:
        client: AsyncClient configured with the API base URL
        token: Bearer access token of the user

    Returns:
        Tuple of (profile, organization user id or None)

    Raises:
        UpstreamError: If the profile request fails
        ResponseFormatError: If the response carries no user object
    """
    payload = await fetch_json(
        client,
        "/2/users/me",
        token,
        params={
            "user.fields": USER_FIELDS,
            "expansions": AFFILIATION_EXPANSION,
        },
        error_prefix="Failed to get user",
    )

    data = payload.get("data") if isinstance(payload, dict) else None
    if not isinstance(data, dict):
        raise ResponseFormatError("X API response had no user data")

    user = UserProfile.model_validate(data)
    org_user_id = user.organization_id

    _log.info("profile_resolved", username=user.username, org_user_id=org_user_id)
    return user, org_user_id

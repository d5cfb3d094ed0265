"""Paginated listing of the users affiliated with an organization."""

from collections.abc import AsyncIterator

import httpx

from xaffiliates.core.fetcher import USER_FIELDS, fetch_json
from xaffiliates.exceptions import PaginationLimitError
from xaffiliates.logging import get_logger
from xaffiliates.models.page import AffiliatePage
from xaffiliates.models.profile import UserProfile

_log = get_logger("enumerator")

MAX_PAGE_SIZE = 1000


async def fetch_affiliate_page(
    client: httpx.AsyncClient,
    token: str,
    org_user_id: str,
    pagination_token: str | None = None,
    page_size: int = MAX_PAGE_SIZE,
) -> AffiliatePage:
    """
    Fetch a single page of affiliates.

    Args:
        client: AsyncClient configured with the API base URL
        token: Bearer access token
        org_user_id: Account id of the organization
        pagination_token: Continuation token from the previous page
        page_size: Requested page size, capped at 1000

    Returns:
        AffiliatePage with profiles and the next continuation token

    Raises:
        UpstreamError: If the request fails
    """
    params = {
        "user.fields": USER_FIELDS,
        "max_results": str(min(page_size, MAX_PAGE_SIZE)),
    }
    if pagination_token:
        params["pagination_token"] = pagination_token

    payload = await fetch_json(
        client,
        f"/2/users/{org_user_id}/affiliates",
        token,
        params=params,
        error_prefix="Failed to get affiliates",
    )
    return AffiliatePage.from_response(payload)


async def iter_affiliate_pages(
    client: httpx.AsyncClient,
    token: str,
    org_user_id: str,
    page_size: int = MAX_PAGE_SIZE,
    max_pages: int | None = None,
) -> AsyncIterator[AffiliatePage]:
    """
    Yield affiliate pages in order until no continuation token is returned.

    Args:
        client: AsyncClient configured with the API base URL
        token: Bearer access token
        org_user_id: Account id of the organization
        page_size: Requested page size, capped at 1000
        max_pages: Stop with PaginationLimitError after this many pages
            if more are still available; None means no limit

    Raises:
        UpstreamError: If any page request fails
        PaginationLimitError: If max_pages is exceeded
    """
    pagination_token: str | None = None
    pages = 0

    while True:
        page = await fetch_affiliate_page(
            client,
            token,
            org_user_id,
            pagination_token=pagination_token,
            page_size=page_size,
        )
        pages += 1
        _log.debug(
            "affiliates_page",
            org_user_id=org_user_id,
            page=pages,
            count=len(page.data),
            has_next=page.next_token is not None,
        )
        yield page

        pagination_token = page.next_token
        if not pagination_token:
            return
        if max_pages is not None and pages >= max_pages:
            raise PaginationLimitError(
                f"Affiliate listing for {org_user_id} exceeded {max_pages} pages"
            )


async def enumerate_affiliates(
    client: httpx.AsyncClient,
    token: str,
    org_user_id: str,
    page_size: int = MAX_PAGE_SIZE,
    max_pages: int | None = None,
) -> list[UserProfile]:
    """
    Collect every affiliate of an organization across all pages.

    Profiles keep the upstream order. A failure on any page discards
    everything collected so far.

    Args:
        client: AsyncClient configured with the API base URL
        token: Bearer access token
        org_user_id: Account id of the organization
        page_size: Requested page size, capped at 1000
        max_pages: Optional page cap, see iter_affiliate_pages

    Returns:
        List of affiliated profiles

    Raises:
        UpstreamError: If any page request fails
        PaginationLimitError: If max_pages is exceeded
    """
    affiliates: list[UserProfile] = []
    async for page in iter_affiliate_pages(
        client, token, org_user_id, page_size=page_size, max_pages=max_pages
    ):
        affiliates.extend(page.data)

    _log.info("affiliates_complete", org_user_id=org_user_id, count=len(affiliates))
    return affiliates

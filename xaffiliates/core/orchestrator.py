"""Dashboard orchestrator - coordinates profile resolution and affiliate listing."""

import httpx

from xaffiliates.config import AffiliatesConfig
from xaffiliates.core.enumerator import enumerate_affiliates
from xaffiliates.core.resolver import resolve_profile
from xaffiliates.logging import get_logger
from xaffiliates.models.dashboard import DashboardData


class DashboardService:
    """
    High-level interface that assembles dashboard data for one user.

    Example:
        async with DashboardService() as service:
            data = await service.load(token)
            print(len(data.affiliates))
    """

    def __init__(
        self,
        config: AffiliatesConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize the service.

        Args:
            config: AffiliatesConfig instance, uses defaults if None
            client: Pre-built AsyncClient; one is created on entry if None
                and closed on exit
        """
        self.config = config or AffiliatesConfig()
        self._client = client
        self._owns_client = client is None
        self._log = get_logger("dashboard")

    async def __aenter__(self) -> "DashboardService":
        """Async context manager entry - open the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.config.api_base_url,
                timeout=self.config.request_timeout_seconds,
            )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - close the HTTP client if we made it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("DashboardService must be used as an async context manager")
        return self._client

    async def resolve(self, token: str):
        """Resolve the user's profile; see resolve_profile."""
        return await resolve_profile(self.client, token)

    async def affiliates(self, token: str, org_user_id: str):
        """List all affiliates of an organization; see enumerate_affiliates."""
        return await enumerate_affiliates(
            self.client,
            token,
            org_user_id,
            page_size=self.config.affiliates_page_size,
            max_pages=self.config.max_affiliate_pages,
        )

    async def load(self, token: str) -> DashboardData:
        """
        Build dashboard data for the owner of a token.

        Profile failures propagate. Any affiliate listing failure is logged
        and leaves the affiliate list empty so the profile can still be shown.

        Args:
            token: Bearer access token of the user

        Returns:
            DashboardData for rendering

        Raises:
            UpstreamError: If the profile request fails
        """
        user, org_user_id = await self.resolve(token)

        affiliates = []
        affiliates_error = None
        if org_user_id:
            try:
                affiliates = await self.affiliates(token, org_user_id)
            except Exception as e:
                self._log.error(
                    "affiliates_failed",
                    org_user_id=org_user_id,
                    error_type=type(e).__name__,
                    error=str(e),
                )
                affiliates_error = str(e)

        return DashboardData(
            user=user,
            affiliates=affiliates,
            org_user_id=org_user_id,
            affiliates_error=affiliates_error,
        )

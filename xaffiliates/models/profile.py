"""User profile data models."""

from pydantic import BaseModel


class PublicMetrics(BaseModel):
    """Engagement counters exposed on a profile."""

    followers_count: int = 0
    following_count: int = 0
    tweet_count: int = 0

    model_config = {"frozen": True}


class AffiliationRecord(BaseModel):
    """Organization affiliation attached to a profile."""

    badge_url: str | None = None
    description: str | None = None
    url: str | None = None
    user_id: list[str] | None = None

    model_config = {"frozen": True}

    @property
    def organization_id(self) -> str | None:
        """Account id of the organization, the first associated user id."""
        if not self.user_id:
            return None
        return self.user_id[0] or None


class UserProfile(BaseModel):
    """Represents an X user as returned by the v2 users endpoints."""

    id: str
    name: str
    username: str
    profile_image_url: str | None = None
    description: str | None = None
    affiliation: AffiliationRecord | None = None
    public_metrics: PublicMetrics | None = None

    model_config = {"frozen": True}

    @property
    def organization_id(self) -> str | None:
        if self.affiliation is None:
            return None
        return self.affiliation.organization_id

    @property
    def profile_url(self) -> str:
        return f"https://x.com/{self.username}"

    def avatar_url(self, size: str = "normal") -> str | None:
        """
        Avatar URL at a different size variant.

        X serves avatars with a ``_normal`` suffix; swapping it for
        ``_bigger`` or ``_400x400`` returns a larger image.

        Args:
            size: Size suffix without the leading underscore

        Returns:
            Resized URL, or None if the profile has no avatar
        """
        if not self.profile_image_url:
            return None
        return self.profile_image_url.replace("_normal", f"_{size}", 1)

"""Dashboard view model."""

from pydantic import BaseModel

from xaffiliates.models.profile import UserProfile


class DashboardData(BaseModel):
    """Everything the dashboard page needs for one request."""

    user: UserProfile
    affiliates: list[UserProfile] = []
    org_user_id: str | None = None
    affiliates_error: str | None = None

    model_config = {"frozen": True}

    @property
    def has_affiliation(self) -> bool:
        return self.user.affiliation is not None

"""Pydantic models for xaffiliates."""

from xaffiliates.models.profile import AffiliationRecord, PublicMetrics, UserProfile
from xaffiliates.models.page import AffiliatePage
from xaffiliates.models.dashboard import DashboardData

__all__ = [
    "AffiliationRecord",
    "PublicMetrics",
    "UserProfile",
    "AffiliatePage",
    "DashboardData",
]

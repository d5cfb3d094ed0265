"""xaffiliates - find the X accounts affiliated with your organization."""

from xaffiliates.models.profile import AffiliationRecord, PublicMetrics, UserProfile
from xaffiliates.models.page import AffiliatePage
from xaffiliates.models.dashboard import DashboardData
from xaffiliates.config import AffiliatesConfig
from xaffiliates.core.orchestrator import DashboardService
from xaffiliates.core.resolver import resolve_profile
from xaffiliates.core.enumerator import enumerate_affiliates
from xaffiliates.core.exporter import to_json, save_json
from xaffiliates.exceptions import (
    XAffiliatesError,
    UpstreamError,
    ResponseFormatError,
    PaginationLimitError,
)

__version__ = "0.1.0"

__all__ = [
    # Main interface
    "DashboardService",
    "AffiliatesConfig",
    "resolve_profile",
    "enumerate_affiliates",
    # Models
    "UserProfile",
    "AffiliationRecord",
    "PublicMetrics",
    "AffiliatePage",
    "DashboardData",
    # Errors
    "XAffiliatesError",
    "UpstreamError",
    "ResponseFormatError",
    "PaginationLimitError",
    # Export utilities
    "to_json",
    "save_json",
    "__version__",
]

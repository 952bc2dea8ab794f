"""Traffic analytics provider package."""

from edge_admin.providers.analytics.base import IAnalyticsProvider
from edge_admin.providers.analytics.mock import MockAnalyticsProvider

__all__ = [
    "IAnalyticsProvider",
    "MockAnalyticsProvider",
]

"""
================================================================================
MOCK ANALYTICS PROVIDER
edge_admin/providers/analytics/mock.py

MODULE PURPOSE:
───────────────
Synthesizes daily HTTP traffic counters in the shape of the upstream
GraphQL analytics response (viewer.zones[].httpRequests1dGroups). No
analytics call is made and the credentials are not checked.

GUARANTEES:
───────────
- Exactly `days` entries
- Ascending by date, the last entry dated "today" (UTC)
- Counters drawn uniformly from [0, TRAFFIC_MAX_*)

================================================================================
"""

from __future__ import annotations

import logging
import random

from datetime import date, datetime, timedelta, timezone
from typing import Callable, List, Optional

from edge_admin.config.constants import (
    TRAFFIC_HISTORY_DAYS,
    TRAFFIC_MAX_BYTES,
    TRAFFIC_MAX_CACHED_BYTES,
    TRAFFIC_MAX_CACHED_REQUESTS,
    TRAFFIC_MAX_REQUESTS,
)
from edge_admin.config.settings import Settings
from edge_admin.providers.schemas import (
    TrafficDay,
    TrafficDimensions,
    TrafficSum,
    TrafficZone,
    ZoneCredentials,
)

from .base import IAnalyticsProvider

logger = logging.getLogger(__name__)


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


class MockAnalyticsProvider(IAnalyticsProvider):
    """
    Random daily traffic generator.

    `rng` and `today` are injectable so tests can pin the output.
    """

    def __init__(
        self,
        days: int = TRAFFIC_HISTORY_DAYS,
        rng: Optional[random.Random] = None,
        today: Callable[[], date] = _utc_today,
    ) -> None:
        if days < 1:
            raise ValueError("days must be >= 1")
        self.days = days
        self._rng = rng or random.Random()
        self._today = today

    async def initialize(self) -> None:
        logger.info("MockAnalyticsProvider ready (days=%d)", self.days)

    async def daily_traffic(self, credentials: ZoneCredentials) -> List[TrafficZone]:
        today = self._today()
        groups = [
            TrafficDay(
                dimensions=TrafficDimensions(datetime=today - timedelta(days=self.days - 1 - i)),
                sum=self._random_sum(),
            )
            for i in range(self.days)
        ]
        return [TrafficZone(http_requests_1d_groups=groups)]

    def _random_sum(self) -> TrafficSum:
        return TrafficSum(
            bytes=self._rng.randrange(TRAFFIC_MAX_BYTES),
            requests=self._rng.randrange(TRAFFIC_MAX_REQUESTS),
            cached_bytes=self._rng.randrange(TRAFFIC_MAX_CACHED_BYTES),
            cached_requests=self._rng.randrange(TRAFFIC_MAX_CACHED_REQUESTS),
        )

    async def shutdown(self) -> None:
        pass


def build_provider(settings: Settings) -> MockAnalyticsProvider:
    return MockAnalyticsProvider()


__all__ = ["MockAnalyticsProvider", "build_provider"]

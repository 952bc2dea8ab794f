from abc import ABC, abstractmethod
from typing import List

from edge_admin.providers.schemas import TrafficZone, ZoneCredentials


class IAnalyticsProvider(ABC):
    """Abstract base class for zone traffic analytics providers."""

    @abstractmethod
    async def initialize(self) -> None:
        pass

    @abstractmethod
    async def daily_traffic(self, credentials: ZoneCredentials) -> List[TrafficZone]:
        """Daily request/bandwidth counters, oldest day first."""
        pass

    @abstractmethod
    async def shutdown(self) -> None:
        pass

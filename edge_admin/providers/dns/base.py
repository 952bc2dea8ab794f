from abc import ABC, abstractmethod
from typing import Any

from edge_admin.providers.schemas import ZoneCredentials


class IDnsProvider(ABC):
    """
    Abstract base class for upstream DNS providers.

    Every operation returns the upstream JSON body as raw bytes so routes
    can forward it to the client untouched.
    """

    @abstractmethod
    async def initialize(self) -> None:
        """Open connections / clients."""
        pass

    @abstractmethod
    async def list_records(self, credentials: ZoneCredentials) -> bytes:
        """List all DNS records of the zone."""
        pass

    @abstractmethod
    async def create_record(
        self,
        credentials: ZoneCredentials,
        record: Any,
    ) -> bytes:
        """Create a DNS record in the zone."""
        pass

    @abstractmethod
    async def update_record(
        self,
        credentials: ZoneCredentials,
        record_id: str,
        record: Any,
    ) -> bytes:
        """Replace an existing DNS record."""
        pass

    @abstractmethod
    async def delete_record(self, credentials: ZoneCredentials, record_id: str) -> bytes:
        """Delete a DNS record."""
        pass

    @abstractmethod
    async def shutdown(self) -> None:
        """Shutdown provider and release resources."""
        pass

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from edge_admin.providers.schemas import Worker


class IWorkersProvider(ABC):
    """Abstract base class for edge worker management providers."""

    @abstractmethod
    async def initialize(self) -> None:
        pass

    @abstractmethod
    async def list_workers(self) -> List[Worker]:
        """List deployed workers."""
        pass

    @abstractmethod
    async def create_worker(self, payload: Any) -> Any:
        """Register a worker. Returns the stored representation."""
        pass

    @abstractmethod
    async def update_worker(self, payload: Any) -> Any:
        """Update a worker. Returns the stored representation."""
        pass

    @abstractmethod
    async def delete_worker(self, worker_id: str) -> str:
        """Delete a worker. Returns the deleted id."""
        pass

    @abstractmethod
    async def deploy(
        self,
        name: str,
        code: str,
        environment_vars: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Deploy worker source code. Returns the public URL."""
        pass

    @abstractmethod
    async def shutdown(self) -> None:
        pass

"""
================================================================================
MOCK WORKERS PROVIDER
edge_admin/providers/workers/mock.py

MODULE PURPOSE:
───────────────
Canned stand-in for worker management and deployment. There is no backing
registry: nothing is stored, compiled or executed.

MOCK OPERATIONS:
────────────────
- List: two fixed workers (MOCK_WORKERS)
- Create / Update: echo the submitted payload
- Delete: echo the submitted id (no existence check)
- Deploy: return https://<name>.<workers_dev_domain>

================================================================================
"""

from __future__ import annotations

import logging

from typing import Any, Dict, List, Optional

from edge_admin.config.constants import MOCK_WORKERS
from edge_admin.config.settings import Settings
from edge_admin.providers.schemas import Worker

from .base import IWorkersProvider

logger = logging.getLogger(__name__)


class MockWorkersProvider(IWorkersProvider):
    """Stateless worker provider returning synthesized results."""

    def __init__(self, workers_dev_domain: str = "workers.dev") -> None:
        self.workers_dev_domain = workers_dev_domain

    async def initialize(self) -> None:
        logger.info("MockWorkersProvider ready (domain=%s)", self.workers_dev_domain)

    async def list_workers(self) -> List[Worker]:
        return [Worker(**worker) for worker in MOCK_WORKERS]

    async def create_worker(self, payload: Any) -> Any:
        return payload

    async def update_worker(self, payload: Any) -> Any:
        return payload

    async def delete_worker(self, worker_id: str) -> str:
        return worker_id

    async def deploy(
        self,
        name: str,
        code: str,
        environment_vars: Optional[Dict[str, Any]] = None,
    ) -> str:
        logger.info(
            "Mock deploy of %s (%d chars, %d env vars)",
            name,
            len(code),
            len(environment_vars or {}),
            extra={"worker_name": name},
        )
        return f"https://{name}.{self.workers_dev_domain}"

    async def shutdown(self) -> None:
        pass


def build_provider(settings: Settings) -> MockWorkersProvider:
    return MockWorkersProvider(workers_dev_domain=settings.workers_dev_domain)


__all__ = ["MockWorkersProvider", "build_provider"]

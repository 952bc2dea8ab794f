"""Workers provider package."""

from edge_admin.providers.workers.base import IWorkersProvider
from edge_admin.providers.workers.mock import MockWorkersProvider

__all__ = [
    "IWorkersProvider",
    "MockWorkersProvider",
]

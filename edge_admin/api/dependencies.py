"""
================================================================================
FILE: edge_admin/api/dependencies.py
================================================================================

PURPOSE:
FastAPI dependency injection functions. Provides reusable dependencies
that are injected into route handlers via Depends():
- Container access
- Provider access (dns, workers, analytics)
- Request context (request_id)

DEPENDENCY CHAIN:
get_container()
├─ Used by: provider dependencies
get_dns_provider() / get_workers_provider() / get_analytics_provider()
├─ Depend on: get_container
├─ Used by: resource endpoints
get_request_context()
├─ Extract request_id set by middleware
├─ Used by: all endpoints (for logging)

TESTING ENVIRONMENT:
- Override dependencies with:
  app.dependency_overrides[get_dns_provider] = lambda: fake_provider
- An httpx.MockTransport-backed CloudflareDnsProvider replaces the upstream
"""
#================================================================================
#IMPORTS
#================================================================================

import logging
from typing import Dict, Any

from fastapi import Depends, Request

from edge_admin.container.service_container import ServiceContainer
from edge_admin.core.exceptions import EdgeAdminException
from edge_admin.providers.analytics.base import IAnalyticsProvider
from edge_admin.providers.dns.base import IDnsProvider
from edge_admin.providers.workers.base import IWorkersProvider
from edge_admin.utils import generate_request_id

logger = logging.getLogger(__name__)

#================================================================================
#DEPENDENCY FUNCTIONS
#================================================================================

def _service_unavailable(message: str) -> EdgeAdminException:
    return EdgeAdminException(message, error_code="SERVICE_UNAVAILABLE", status_code=503)


async def get_container() -> ServiceContainer:
    """
    Get ServiceContainer (provider factory container).

    Raises:
        EdgeAdminException(503): If container initialization failed
    """
    from .main import get_container as _get_container

    try:
        return _get_container()
    except RuntimeError as e:
        logger.error(f"Container not available: {str(e)}")
        raise _service_unavailable("Service container not initialized")


async def get_dns_provider(
    container: ServiceContainer = Depends(get_container),
) -> IDnsProvider:
    return container.get_dns()


async def get_workers_provider(
    container: ServiceContainer = Depends(get_container),
) -> IWorkersProvider:
    return container.get_workers()


async def get_analytics_provider(
    container: ServiceContainer = Depends(get_container),
) -> IAnalyticsProvider:
    return container.get_analytics()


async def get_request_context(request: Request) -> Dict[str, Any]:
    """
    Extract and provide request context.

    Returns:
        Dict with: request_id, method, path
    """
    return {
        "request_id": getattr(request.state, "request_id", None) or generate_request_id(),
        "method": request.method,
        "path": request.url.path,
    }

from __future__ import annotations

import pytest

from edge_admin.config.settings import Settings
from edge_admin.container.service_container import ServiceContainer
from edge_admin.core.exceptions import ServiceInitializationError
from edge_admin.providers.analytics.mock import MockAnalyticsProvider
from edge_admin.providers.dns.cloudflare import CloudflareDnsProvider
from edge_admin.providers.workers.mock import MockWorkersProvider


@pytest.mark.asyncio
async def test_container_loads_configured_providers() -> None:
    container = ServiceContainer(Settings())
    await container.initialize()
    try:
        assert isinstance(container.get_dns(), CloudflareDnsProvider)
        assert isinstance(container.get_workers(), MockWorkersProvider)
        assert isinstance(container.get_analytics(), MockAnalyticsProvider)
    finally:
        await container.shutdown()

    with pytest.raises(RuntimeError):
        container.get_dns()


@pytest.mark.asyncio
async def test_unknown_provider_module_fails_initialization() -> None:
    settings = Settings.model_construct(
        dns_provider="route53",
        workers_provider="mock",
        analytics_provider="mock",
    )
    container = ServiceContainer(settings)

    with pytest.raises(ServiceInitializationError) as exc_info:
        await container.initialize()

    assert "edge_admin.providers.dns.route53" in str(exc_info.value)


def test_accessors_require_initialization() -> None:
    container = ServiceContainer(Settings())

    with pytest.raises(RuntimeError):
        container.get_workers()
    with pytest.raises(RuntimeError):
        container.get_analytics()

from __future__ import annotations

import random
from datetime import date

import pytest

from edge_admin.config.settings import Settings
from edge_admin.providers.analytics import mock as analytics_mock
from edge_admin.providers.analytics.mock import MockAnalyticsProvider
from edge_admin.providers.schemas import ZoneCredentials
from edge_admin.providers.workers import mock as workers_mock
from edge_admin.providers.workers.mock import MockWorkersProvider

CREDENTIALS = ZoneCredentials(zone_id="z", account_email="c", api_key="k")
FIXED_TODAY = date(2024, 3, 1)
SEED = 1234


@pytest.mark.asyncio
async def test_traffic_window_crosses_month_boundary() -> None:
    provider = MockAnalyticsProvider(days=3, rng=random.Random(SEED), today=lambda: FIXED_TODAY)

    zones = await provider.daily_traffic(CREDENTIALS)

    dates = [day.dimensions.datetime for day in zones[0].http_requests_1d_groups]
    assert dates == [date(2024, 2, 28), date(2024, 2, 29), date(2024, 3, 1)]


@pytest.mark.asyncio
async def test_traffic_is_reproducible_with_seeded_rng() -> None:
    first = MockAnalyticsProvider(rng=random.Random(SEED), today=lambda: FIXED_TODAY)
    second = MockAnalyticsProvider(rng=random.Random(SEED), today=lambda: FIXED_TODAY)

    assert await first.daily_traffic(CREDENTIALS) == await second.daily_traffic(CREDENTIALS)


@pytest.mark.asyncio
async def test_traffic_serializes_with_upstream_keys() -> None:
    provider = MockAnalyticsProvider(days=1, rng=random.Random(SEED), today=lambda: FIXED_TODAY)

    zone = (await provider.daily_traffic(CREDENTIALS))[0]
    payload = zone.model_dump(mode="json", by_alias=True)

    entry = payload["httpRequests1dGroups"][0]
    assert entry["dimensions"] == {"datetime": "2024-03-01"}
    assert set(entry["sum"]) == {"bytes", "requests", "cachedBytes", "cachedRequests"}


def test_traffic_rejects_empty_window() -> None:
    with pytest.raises(ValueError):
        MockAnalyticsProvider(days=0)


@pytest.mark.asyncio
async def test_deploy_uses_configured_domain() -> None:
    provider = workers_mock.build_provider(Settings(workers_dev_domain=".edge.example."))

    url = await provider.deploy("foo", "code", environment_vars={"A": "1"})

    assert url == "https://foo.edge.example"


@pytest.mark.asyncio
async def test_worker_mutations_echo_input() -> None:
    provider = MockWorkersProvider()
    payload = {"name": "w", "nested": {"k": [1, 2]}}

    assert await provider.create_worker(payload) is payload
    assert await provider.update_worker(payload) is payload
    assert await provider.delete_worker("w-1") == "w-1"


@pytest.mark.asyncio
async def test_list_workers_is_stable() -> None:
    provider = MockWorkersProvider()

    names = [worker.name for worker in await provider.list_workers()]

    assert names == ["api-proxy", "auth-worker"]


def test_analytics_build_provider_defaults_to_thirty_days() -> None:
    provider = analytics_mock.build_provider(Settings())

    assert provider.days == 30

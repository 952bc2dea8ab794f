from __future__ import annotations

import httpx
import pytest

from edge_admin.config.settings import Settings
from edge_admin.core.exceptions import UpstreamError
from edge_admin.providers.dns.cloudflare import (
    CloudflareDnsConfig,
    CloudflareDnsProvider,
    build_provider,
)
from edge_admin.providers.schemas import ZoneCredentials

API_BASE = "https://upstream.test/client/v4"
CREDENTIALS = ZoneCredentials(zone_id="zone/1", account_email="ops@example.com", api_key="k")


def _provider(handler) -> CloudflareDnsProvider:
    return CloudflareDnsProvider(
        CloudflareDnsConfig(api_base=API_BASE, timeout_s=5.0),
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.asyncio
async def test_list_records_returns_raw_bytes_and_escapes_zone_id() -> None:
    seen = []
    body = b'{"success": true, "result": []}'

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, content=body)

    provider = _provider(handler)
    await provider.initialize()
    try:
        result = await provider.list_records(CREDENTIALS)
    finally:
        await provider.shutdown()

    assert result == body
    assert seen[0].url.raw_path == b"/client/v4/zones/zone%2F1/dns_records"


@pytest.mark.asyncio
async def test_delete_record_sends_no_body() -> None:
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"success": True})

    provider = _provider(handler)
    await provider.initialize()
    try:
        await provider.delete_record(CREDENTIALS, "rec-1")
    finally:
        await provider.shutdown()

    assert seen[0].method == "DELETE"
    assert seen[0].content == b""
    assert seen[0].url.path.endswith("/dns_records/rec-1")


@pytest.mark.asyncio
async def test_error_status_raises_upstream_error_with_status() -> None:
    provider = _provider(lambda request: httpx.Response(429, json={"success": False}))
    await provider.initialize()
    try:
        with pytest.raises(UpstreamError) as exc_info:
            await provider.update_record(CREDENTIALS, "rec-1", {"type": "A"})
    finally:
        await provider.shutdown()

    assert exc_info.value.upstream_status == 429
    assert exc_info.value.status_code == 500
    assert str(exc_info.value) == "Failed to update DNS record: HTTP 429: Too Many Requests"


@pytest.mark.asyncio
async def test_transport_error_has_no_upstream_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("connect timed out")

    provider = _provider(handler)
    await provider.initialize()
    try:
        with pytest.raises(UpstreamError) as exc_info:
            await provider.create_record(CREDENTIALS, {"type": "A"})
    finally:
        await provider.shutdown()

    assert exc_info.value.upstream_status is None
    assert str(exc_info.value) == "Failed to create DNS record: connect timed out"


@pytest.mark.asyncio
async def test_request_before_initialize_is_rejected() -> None:
    provider = _provider(lambda request: httpx.Response(200, json={}))

    with pytest.raises(RuntimeError):
        await provider.list_records(CREDENTIALS)


def test_build_provider_uses_settings() -> None:
    settings = Settings(upstream_api_base="https://example.test/v4/", upstream_timeout=7)

    provider = build_provider(settings)

    assert provider.config == CloudflareDnsConfig(api_base="https://example.test/v4", timeout_s=7.0)


def test_credentials_are_hidden_from_repr() -> None:
    text = repr(CREDENTIALS)

    assert "zone/1" in text
    assert "ops@example.com" not in text
    assert "api_key" not in text

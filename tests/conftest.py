"""
Pytest configuration for the Edge Admin gateway.

Provides fixtures for:
- A scripted upstream provider behind httpx.MockTransport
- A CloudflareDnsProvider wired to that transport
- The FastAPI app with the DNS provider overridden, and its TestClient
"""

from __future__ import annotations

import asyncio
from typing import Generator, List, Optional

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from edge_admin.api.dependencies import get_dns_provider
from edge_admin.api.main import create_app
from edge_admin.providers.dns.cloudflare import CloudflareDnsConfig, CloudflareDnsProvider

DEFAULT_UPSTREAM_BODY = b'{"success":true,"errors":[],"messages":[],"result":[]}'


class FakeUpstream:
    """
    Scripted upstream: records every request and replies with the configured
    status and body, or raises `error` when set.
    """

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.body = DEFAULT_UPSTREAM_BODY
        self.error: Optional[Exception] = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(
            self.status_code,
            content=self.body,
            headers={"Content-Type": "application/json"},
        )

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "upstream was never called"
        return self.requests[-1]


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def dns_provider(upstream: FakeUpstream) -> Generator[CloudflareDnsProvider, None, None]:
    """CloudflareDnsProvider talking to the scripted upstream."""
    provider = CloudflareDnsProvider(
        CloudflareDnsConfig(),
        transport=httpx.MockTransport(upstream.handler),
    )
    asyncio.run(provider.initialize())
    yield provider
    asyncio.run(provider.shutdown())


@pytest.fixture
def app(dns_provider: CloudflareDnsProvider) -> FastAPI:
    application = create_app()
    application.dependency_overrides[get_dns_provider] = lambda: dns_provider
    return application


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """TestClient used as a context manager so startup/shutdown hooks run."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def credentials() -> dict:
    return {"zoneId": "zone-1", "cfId": "ops@example.com", "apiKey": "key-123"}

"""
FILE: edge_admin/providers/dns/cloudflare.py

Cloudflare DNS provider over the v4 REST API, using an httpx AsyncClient.

Each operation is a single attempt: no retry, no caching, no rate limiting.
The upstream body is returned as raw bytes so the route can forward it
byte-for-byte. ServiceContainer imports:

from edge_admin.providers.dns.cloudflare import build_provider
"""

from __future__ import annotations

import logging

from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import quote

import httpx

from edge_admin.config.constants import AUTH_EMAIL_HEADER, AUTH_KEY_HEADER
from edge_admin.config.settings import Settings
from edge_admin.core.exceptions import UpstreamError
from edge_admin.providers.schemas import ZoneCredentials

from .base import IDnsProvider

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CloudflareDnsConfig:
    api_base: str = "https://api.cloudflare.com/client/v4"
    timeout_s: float = 30.0


class CloudflareDnsProvider(IDnsProvider):
    """
    Pass-through client for /zones/{zone_id}/dns_records.

    Notes:
    - Authenticates with the account e-mail and global API key headers
      taken from the request, never from configuration.
    - A transport may be injected (tests use httpx.MockTransport).
    """

    def __init__(
        self,
        config: CloudflareDnsConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = config
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        logger.info("CloudflareDnsProvider created (api_base=%s)", self.config.api_base)

    async def initialize(self) -> None:
        """Create the pooled AsyncClient."""
        if self._client is not None:
            return
        self._client = httpx.AsyncClient(
            base_url=self.config.api_base,
            timeout=self.config.timeout_s,
            transport=self._transport,
        )
        logger.info("✓ Cloudflare DNS client initialized (timeout=%ss)", self.config.timeout_s)

    async def list_records(self, credentials: ZoneCredentials) -> bytes:
        return await self._request(
            "GET",
            self._records_path(credentials.zone_id),
            credentials,
            action="fetch DNS records",
        )

    async def create_record(self, credentials: ZoneCredentials, record: Any) -> bytes:
        return await self._request(
            "POST",
            self._records_path(credentials.zone_id),
            credentials,
            action="create DNS record",
            payload=record,
        )

    async def update_record(
        self,
        credentials: ZoneCredentials,
        record_id: str,
        record: Any,
    ) -> bytes:
        return await self._request(
            "PUT",
            self._records_path(credentials.zone_id, record_id),
            credentials,
            action="update DNS record",
            payload=record,
        )

    async def delete_record(self, credentials: ZoneCredentials, record_id: str) -> bytes:
        return await self._request(
            "DELETE",
            self._records_path(credentials.zone_id, record_id),
            credentials,
            action="delete DNS record",
        )

    @staticmethod
    def _records_path(zone_id: str, record_id: Optional[str] = None) -> str:
        path = f"/zones/{quote(zone_id, safe='')}/dns_records"
        if record_id is not None:
            path = f"{path}/{quote(record_id, safe='')}"
        return path

    async def _request(
        self,
        method: str,
        path: str,
        credentials: ZoneCredentials,
        action: str,
        payload: Any = None,
    ) -> bytes:
        """
        Perform one upstream call and return the JSON body bytes.

        Raises:
            UpstreamError: transport failure, timeout, non-2xx status or a
                2xx body that is not JSON. The message always starts with
                "Failed to <action>: ".
        """
        if self._client is None:
            raise RuntimeError("CloudflareDnsProvider not initialized. Call initialize() first.")

        headers = {
            AUTH_EMAIL_HEADER: credentials.account_email,
            AUTH_KEY_HEADER: credentials.api_key,
            "Content-Type": "application/json",
        }
        request_kwargs = {"headers": headers}
        if payload is not None:
            request_kwargs["json"] = payload

        try:
            response = await self._client.request(method, path, **request_kwargs)
        except httpx.HTTPError as e:
            reason = str(e) or e.__class__.__name__
            logger.error("Upstream %s %s failed: %s", method, path, reason)
            raise UpstreamError(f"Failed to {action}: {reason}") from e

        if not response.is_success:
            logger.warning(
                "Upstream %s %s returned HTTP %s",
                method,
                path,
                response.status_code,
                extra={"upstream_status": response.status_code},
            )
            raise UpstreamError(
                f"Failed to {action}: HTTP {response.status_code}: {response.reason_phrase}",
                upstream_status=response.status_code,
            )

        try:
            response.json()
        except ValueError as e:
            raise UpstreamError(
                f"Failed to {action}: upstream returned invalid JSON",
                upstream_status=response.status_code,
            ) from e

        return response.content

    async def shutdown(self) -> None:
        """Close the AsyncClient and its connection pool."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
        logger.info("CloudflareDnsProvider shutdown complete")


def build_provider(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> CloudflareDnsProvider:
    """Build a provider from application settings."""
    config = CloudflareDnsConfig(**settings.get_upstream_config())
    return CloudflareDnsProvider(config=config, transport=transport)


__all__ = ["CloudflareDnsConfig", "CloudflareDnsProvider", "build_provider"]

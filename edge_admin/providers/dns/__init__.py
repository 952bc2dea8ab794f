"""DNS provider package."""

from edge_admin.providers.dns.base import IDnsProvider
from edge_admin.providers.dns.cloudflare import CloudflareDnsProvider

__all__ = [
    "IDnsProvider",
    "CloudflareDnsProvider",
]

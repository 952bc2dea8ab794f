"""
================================================================================
SERVICE CONTAINER - PROVIDER DISCOVERY & INITIALIZATION
================================================================================

Main dependency injection container.

Implements TWO-LAYER SWAPPABILITY:

Layer 1: .env determines which PROVIDER FILE to import
  Example: DNS_PROVIDER=cloudflare  →  Import edge_admin.providers.dns.cloudflare

Layer 2: Provider file exposes build_provider(settings)
  Example: edge_admin/providers/dns/cloudflare.py maps UPSTREAM_API_BASE and
           UPSTREAM_TIMEOUT onto its CloudflareDnsConfig

USAGE:

  container = ServiceContainer(settings)
  await container.initialize()
  dns = container.get_dns()
  body = await dns.list_records(credentials)

FLOW:

  .env: DNS_PROVIDER=cloudflare
    ↓
  ServiceContainer reads settings.dns_provider = "cloudflare"
    ↓
  Dynamically import: edge_admin.providers.dns.cloudflare
    ↓
  Build: module.build_provider(settings)
    ↓
  Initialize: await provider.initialize()
    ↓
  Return to application
"""

import logging
import importlib
from typing import Optional, Any

from edge_admin.config.settings import Settings
from edge_admin.core.exceptions import ServiceInitializationError

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Dependency injection container for the upstream providers.

    Providers are the only long-lived objects in the process; handlers
    themselves are stateless.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

        self._dns: Optional[Any] = None
        self._workers: Optional[Any] = None
        self._analytics: Optional[Any] = None

        logger.info("ServiceContainer instantiated")

    async def initialize(self) -> None:
        """Import, build and initialize every configured provider."""
        try:
            self._dns = await self._load_provider(
                provider_type="dns",
                provider_name=self.settings.dns_provider,
                module_path="edge_admin.providers.dns",
            )
            self._workers = await self._load_provider(
                provider_type="workers",
                provider_name=self.settings.workers_provider,
                module_path="edge_admin.providers.workers",
            )
            self._analytics = await self._load_provider(
                provider_type="analytics",
                provider_name=self.settings.analytics_provider,
                module_path="edge_admin.providers.analytics",
            )
            logger.info("✓ ServiceContainer initialized successfully")

        except ServiceInitializationError:
            raise
        except Exception as e:
            logger.error(
                f"ServiceContainer initialization failed: {str(e)}",
                exc_info=True,
            )
            raise ServiceInitializationError(
                f"Failed to initialize container: {str(e)}"
            ) from e

    async def _load_provider(
        self,
        provider_type: str,
        provider_name: str,
        module_path: str,
    ) -> Any:
        """
        Load a provider using two-layer logic.

        Args:
            provider_type: Type (dns, workers, analytics)
            provider_name: Name from .env (cloudflare, mock)
            module_path: Import base path (edge_admin.providers.dns, etc.)

        Returns:
            Initialized provider instance
        """
        full_path = f"{module_path}.{provider_name}"
        try:
            logger.debug(f"[Layer 1] Loading {provider_type} provider from {full_path}")
            provider_module = importlib.import_module(full_path)

            if not hasattr(provider_module, "build_provider"):
                raise AttributeError(
                    f"Provider module {full_path} does not export 'build_provider'"
                )

            provider_instance = provider_module.build_provider(self.settings)
            logger.debug(
                f"[Layer 2] Built {provider_instance.__class__.__name__}, initializing"
            )
            await provider_instance.initialize()

            logger.info(f"✓ {provider_type.upper()} initialized: {provider_name}")
            return provider_instance

        except ImportError as e:
            raise ServiceInitializationError(
                f"Failed to import {provider_type} provider '{provider_name}' "
                f"from {full_path}: {str(e)}"
            ) from e
        except AttributeError as e:
            raise ServiceInitializationError(
                f"Provider configuration error: {str(e)}"
            ) from e
        except Exception as e:
            raise ServiceInitializationError(
                f"Failed to initialize {provider_type} provider '{provider_name}': {str(e)}"
            ) from e

    async def shutdown(self) -> None:
        """Shutdown all providers."""
        logger.info("Shutting down ServiceContainer...")

        providers = [
            ("DNS", self._dns),
            ("Workers", self._workers),
            ("Analytics", self._analytics),
        ]

        for name, provider in providers:
            if provider:
                try:
                    await provider.shutdown()
                    logger.info(f"✓ {name} shutdown complete")
                except Exception as e:
                    logger.error(f"Error shutting down {name}: {str(e)}")

        self._dns = self._workers = self._analytics = None
        logger.info("✓ ServiceContainer shutdown complete")

    # ========================================================================
    # ACCESSOR METHODS
    # ========================================================================

    def get_dns(self) -> Any:
        """Get DNS provider instance."""
        if self._dns is None:
            raise RuntimeError("DNS provider not initialized")
        return self._dns

    def get_workers(self) -> Any:
        """Get workers provider instance."""
        if self._workers is None:
            raise RuntimeError("Workers provider not initialized")
        return self._workers

    def get_analytics(self) -> Any:
        """Get analytics provider instance."""
        if self._analytics is None:
            raise RuntimeError("Analytics provider not initialized")
        return self._analytics

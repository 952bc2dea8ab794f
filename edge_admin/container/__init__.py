"""
Container package.

Exports:
    ServiceContainer: Main dependency injection container for providers.
"""

from .service_container import ServiceContainer

__all__ = ["ServiceContainer"]

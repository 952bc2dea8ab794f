"""
Core layer: the exception hierarchy shared by routes and providers.

    from edge_admin.core import UpstreamError
"""

from edge_admin.core.exceptions import (
    EdgeAdminException,
    MissingParametersError,
    RequestBodyError,
    UpstreamError,
    ConfigurationError,
    ServiceInitializationError,
)

__all__ = [
    "EdgeAdminException",
    "MissingParametersError",
    "RequestBodyError",
    "UpstreamError",
    "ConfigurationError",
    "ServiceInitializationError",
]

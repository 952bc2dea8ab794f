"""
================================================================================
UTILS PACKAGE - Utility Functions and Helpers
================================================================================

Modules:
  - helpers: request ids, parameter presence checks, timing
  - logging: root logging configuration (console or JSON)

USAGE:
------
    from edge_admin.utils import require_params, generate_request_id

    require_params(request.query_params, ["zoneId", "cfId", "apiKey"])

================================================================================
"""

from .helpers import (
    generate_request_id,
    format_logger_context,
    find_missing_params,
    require_params,
    measure_time,
)

from .logging import configure_logging, JsonFormatter

__all__ = [
    # helpers
    "generate_request_id",
    "format_logger_context",
    "find_missing_params",
    "require_params",
    "measure_time",
    # logging
    "configure_logging",
    "JsonFormatter",
]

"""
================================================================================
HELPERS - Common Utility Functions
================================================================================

PURPOSE:
--------
Provide common helper utilities:
  - Request ID generation
  - Structured logging context
  - Presence-only parameter validation
  - Time measurement

FUNCTIONS:
  - generate_request_id: UUID v4 correlation id
  - format_logger_context: extra={} dict for log calls
  - find_missing_params: names whose value is absent, null or ""
  - require_params: raise MissingParametersError for missing names
  - measure_time: Context manager for measuring execution time

================================================================================
"""

import logging
import time
import uuid
from contextlib import contextmanager
from typing import Any, Dict, List, Mapping, Optional, Sequence

from edge_admin.core.exceptions import MissingParametersError

logger = logging.getLogger(__name__)


def generate_request_id() -> str:
    """Generate unique request ID (UUID v4)."""
    return str(uuid.uuid4())


def format_logger_context(request_id: str, operation: Optional[str] = None, **kwargs) -> Dict[str, Any]:
    """Format structured logging context."""
    context: Dict[str, Any] = {"request_id": request_id}
    if operation:
        context["operation"] = operation
    context.update(kwargs)
    return context


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def find_missing_params(source: Optional[Mapping[str, Any]], names: Sequence[str]) -> List[str]:
    """
    Return the required names that are absent, null or empty in source.

    Presence is the only check: "0", {} and whitespace all count as present.
    A source that is not a mapping (e.g. a JSON array body) is missing
    every name.

    Examples:
        >>> find_missing_params({"zoneId": "z", "cfId": ""}, ["zoneId", "cfId", "apiKey"])
        ['cfId', 'apiKey']
    """
    if not isinstance(source, Mapping):
        return list(names)
    return [name for name in names if _is_missing(source.get(name))]


def require_params(source: Optional[Mapping[str, Any]], names: Sequence[str]) -> None:
    """
    Raise MissingParametersError naming every missing parameter.

    Args:
        source: Query params or decoded JSON body
        names: Required parameter names, in the order they should be reported

    Raises:
        MissingParametersError: If at least one name is missing
    """
    missing = find_missing_params(source, names)
    if missing:
        raise MissingParametersError(missing)


@contextmanager
def measure_time(operation_name: str, request_id: Optional[str] = None):
    """
    Context manager to measure execution time.

    Usage:
        with measure_time("list DNS records", request_id):
            ...
        # Logs: "list DNS records completed in 125.5ms"
    """
    start_time = time.time()
    try:
        yield
    finally:
        duration_ms = (time.time() - start_time) * 1000
        logger.debug(
            f"{operation_name} completed in {duration_ms:.1f}ms",
            extra={"request_id": request_id, "duration_ms": round(duration_ms, 1)},
        )

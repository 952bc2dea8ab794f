# MERGED: 3 sections with separation comments
#│   │   ├── SECTION 1: Base exceptions
#│   │   ├── SECTION 2: Request exceptions
#│   │   └── SECTION 3: Upstream & startup exceptions
"""
================================================================================
FILE: edge_admin/core/exceptions.py
================================================================================

PURPOSE:
    Custom exception hierarchy for the gateway. Every error a handler wants to
    report to the caller is raised as an EdgeAdminException subclass and is
    rendered by the application exception handler as

        {"success": false, "error": "<message>"}

    with the exception's status_code.

EXCEPTION CATEGORIES:
    - REQUEST (caller's fault, 400):
        * MissingParametersError: required params absent or empty
    - BODY (unparseable JSON body, 500 like any handler failure):
        * RequestBodyError
    - UPSTREAM (provider call failed, 500):
        * UpstreamError: non-2xx status, transport failure, timeout,
          non-JSON success body
    - FATAL (startup only, never reaches a client):
        * ConfigurationError, ServiceInitializationError

KEY FACTS:
    - NO imports from edge_admin modules (prevents circular dependencies)
    - No distinction between transient and permanent upstream failures
    - Nothing is retried
"""

# ================================================================================
# IMPORTS
# ================================================================================

from typing import Optional, Dict, Any, Sequence

# ================================================================================
# SECTION 1: BASE EXCEPTIONS
# ================================================================================

class EdgeAdminException(Exception):
    """
    Root exception for all gateway errors.

    Attributes:
        message (str): Human-readable error message (sent to the client)
        error_code (str): Machine-readable error code for logs
        status_code (int): HTTP status returned to the client
        context (dict): Additional context for logging (never sent)
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        error_code: str = "UNKNOWN_ERROR",
        status_code: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code
        if status_code is not None:
            self.status_code = status_code
        self.context = context or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to the client-facing JSON envelope."""
        return {
            "success": False,
            "error": self.message,
        }

# ================================================================================
# SECTION 2: REQUEST EXCEPTIONS
# ================================================================================

class MissingParametersError(EdgeAdminException):
    """One or more required request parameters are absent or empty."""

    status_code = 400

    def __init__(self, missing: Sequence[str], context: Optional[Dict] = None):
        self.missing = list(missing)
        super().__init__(
            f"Missing required parameters: {', '.join(self.missing)}",
            error_code="MISSING_PARAMETERS",
            context=context,
        )


class RequestBodyError(EdgeAdminException):
    """Request body could not be decoded as JSON."""

    def __init__(self, message: str, context: Optional[Dict] = None):
        super().__init__(message, error_code="INVALID_BODY", context=context)

# ================================================================================
# SECTION 3: UPSTREAM & STARTUP EXCEPTIONS
# ================================================================================

class UpstreamError(EdgeAdminException):
    """
    Upstream provider call failed.

    upstream_status is the provider's HTTP status when one was received,
    None for transport failures and timeouts.
    """

    def __init__(
        self,
        message: str,
        upstream_status: Optional[int] = None,
        context: Optional[Dict] = None,
    ):
        self.upstream_status = upstream_status
        super().__init__(message, error_code="UPSTREAM_ERROR", context=context)


class ConfigurationError(EdgeAdminException):
    """Invalid configuration (fatal)"""

    def __init__(self, message: str, context: Optional[Dict] = None):
        super().__init__(message, error_code="CONFIG_ERROR", context=context)


class ServiceInitializationError(EdgeAdminException):
    """Raised when a service/provider fails to initialize (fatal)."""

    def __init__(self, message: str, context: Optional[Dict] = None):
        super().__init__(message, error_code="SERVICE_INIT_ERROR", context=context)

# ============================================================================
# API Models - Response Schemas
# ============================================================================

"""
Pydantic models for API responses.
Every JSON body carries a `success` boolean; failures carry `error`.

DNS responses have no model: the upstream body is forwarded verbatim.
"""

from typing import Any, List

from pydantic import BaseModel, ConfigDict

from edge_admin.providers.schemas import TrafficZone, Worker


# ============================================================================
# GENERIC ENVELOPES
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""
    success: bool = False
    error: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": False,
                "error": "Missing required parameters: zoneId, apiKey",
            }
        }
    )


# ============================================================================
# WORKER RESPONSES
# ============================================================================


class WorkerListResponse(BaseModel):
    """Response for GET /api/workers."""
    success: bool = True
    result: List[Worker] = []


class WorkerMutationResponse(BaseModel):
    """Response for POST/PUT /api/workers (payload echoed back)."""
    success: bool = True
    result: Any = None
    message: str


class WorkerDeleteResponse(BaseModel):
    """Response for DELETE /api/workers."""
    success: bool = True
    id: str
    message: str


class DeployWorkerResponse(BaseModel):
    """Response for POST /api/deploy-worker."""
    success: bool = True
    message: str
    url: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": True,
                "message": "Worker foo deployed successfully",
                "url": "https://foo.workers.dev",
            }
        }
    )


# ============================================================================
# TRAFFIC RESPONSE (mimics the upstream GraphQL analytics shape)
# ============================================================================


class TrafficViewer(BaseModel):
    zones: List[TrafficZone] = []


class TrafficData(BaseModel):
    viewer: TrafficViewer


class TrafficResult(BaseModel):
    data: TrafficData


class TrafficResponse(BaseModel):
    """Response for GET /api/traffic."""
    success: bool = True
    result: TrafficResult

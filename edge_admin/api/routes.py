# edge_admin/api/routes.py

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from edge_admin.api.dependencies import (
    get_analytics_provider,
    get_dns_provider,
    get_request_context,
    get_workers_provider,
)
from edge_admin.api.models import (
    DeployWorkerResponse,
    ErrorResponse,
    TrafficData,
    TrafficResponse,
    TrafficResult,
    TrafficViewer,
    WorkerDeleteResponse,
    WorkerListResponse,
    WorkerMutationResponse,
)
from edge_admin.config.constants import (
    API_PREFIX,
    CORS_HEADERS,
    CREDENTIAL_PARAMS,
    DASHBOARD_FILENAME,
    DEPLOY_WORKER_PATH,
    DNS_RECORDS_PATH,
    PARAM_ACCOUNT_ID,
    PARAM_API_KEY,
    PARAM_CODE,
    PARAM_ENVIRONMENT_VARS,
    PARAM_RECORD,
    PARAM_RECORD_ID,
    PARAM_WORKER_ID,
    PARAM_WORKER_NAME,
    PARAM_ZONE_ID,
    TRAFFIC_PATH,
    WORKERS_PATH,
)
from edge_admin.core.exceptions import RequestBodyError
from edge_admin.providers.analytics.base import IAnalyticsProvider
from edge_admin.providers.dns.base import IDnsProvider
from edge_admin.providers.schemas import ZoneCredentials
from edge_admin.providers.workers.base import IWorkersProvider
from edge_admin.utils import format_logger_context, measure_time, require_params

logger = logging.getLogger(__name__)
router = APIRouter(prefix=API_PREFIX, tags=["edge-admin"])

# Registered after `router`: unmatched /api/* paths, then the dashboard
fallback_router = APIRouter(include_in_schema=False)

_ERROR_RESPONSES: Dict[int, Dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Missing required parameters"},
    500: {"model": ErrorResponse, "description": "Upstream or handler failure"},
}

_STATIC_DIR = Path(__file__).resolve().parent.parent / "static"


# ============================================================================
# REQUEST HELPERS
# ============================================================================

async def _read_json_body(request: Request, action: str) -> Any:
    """Decode the JSON body, reporting failures as 'Failed to <action>: ...'."""
    try:
        return await request.json()
    except ValueError as e:
        raise RequestBodyError(f"Failed to {action}: {e}")


def _credentials_from(source: Mapping[str, Any]) -> ZoneCredentials:
    return ZoneCredentials(
        zone_id=str(source[PARAM_ZONE_ID]),
        account_email=str(source[PARAM_ACCOUNT_ID]),
        api_key=str(source[PARAM_API_KEY]),
    )


def _passthrough(body: bytes) -> Response:
    """Forward the upstream JSON bytes unchanged."""
    return Response(content=body, media_type="application/json")


# ============================================================================
# DNS RECORDS (real upstream calls)
# ============================================================================

@router.get(
    DNS_RECORDS_PATH,
    summary="List DNS records",
    description="Proxy GET /zones/{zoneId}/dns_records using query credentials",
    responses=_ERROR_RESPONSES,
)
async def list_dns_records(
    request: Request,
    dns: IDnsProvider = Depends(get_dns_provider),
    request_context: dict = Depends(get_request_context),
) -> Response:
    request_id = request_context["request_id"]
    params = request.query_params
    require_params(params, CREDENTIAL_PARAMS)
    credentials = _credentials_from(params)

    logger.info(
        f"Listing DNS records [{request_id}]",
        extra=format_logger_context(request_id, "dns.list", zone_id=credentials.zone_id),
    )
    with measure_time("list DNS records", request_id):
        body = await dns.list_records(credentials)
    return _passthrough(body)


@router.post(
    DNS_RECORDS_PATH,
    summary="Create DNS record",
    description="Body: {zoneId, cfId, apiKey, record}. `record` is forwarded as-is.",
    responses=_ERROR_RESPONSES,
)
async def create_dns_record(
    request: Request,
    dns: IDnsProvider = Depends(get_dns_provider),
    request_context: dict = Depends(get_request_context),
) -> Response:
    request_id = request_context["request_id"]
    body = await _read_json_body(request, "create DNS record")
    require_params(body, CREDENTIAL_PARAMS + (PARAM_RECORD,))
    credentials = _credentials_from(body)

    logger.info(
        f"Creating DNS record [{request_id}]",
        extra=format_logger_context(request_id, "dns.create", zone_id=credentials.zone_id),
    )
    with measure_time("create DNS record", request_id):
        result = await dns.create_record(credentials, body[PARAM_RECORD])
    return _passthrough(result)


@router.put(
    DNS_RECORDS_PATH,
    summary="Update DNS record",
    description="Body: {zoneId, cfId, apiKey, recordId, record}. `record` is forwarded as-is.",
    responses=_ERROR_RESPONSES,
)
async def update_dns_record(
    request: Request,
    dns: IDnsProvider = Depends(get_dns_provider),
    request_context: dict = Depends(get_request_context),
) -> Response:
    request_id = request_context["request_id"]
    body = await _read_json_body(request, "update DNS record")
    require_params(body, CREDENTIAL_PARAMS + (PARAM_RECORD_ID, PARAM_RECORD))
    credentials = _credentials_from(body)
    record_id = str(body[PARAM_RECORD_ID])

    logger.info(
        f"Updating DNS record {record_id} [{request_id}]",
        extra=format_logger_context(request_id, "dns.update", zone_id=credentials.zone_id),
    )
    with measure_time("update DNS record", request_id):
        result = await dns.update_record(credentials, record_id, body[PARAM_RECORD])
    return _passthrough(result)


@router.delete(
    DNS_RECORDS_PATH,
    summary="Delete DNS record",
    description="Query: zoneId, cfId, apiKey, recordId",
    responses=_ERROR_RESPONSES,
)
async def delete_dns_record(
    request: Request,
    dns: IDnsProvider = Depends(get_dns_provider),
    request_context: dict = Depends(get_request_context),
) -> Response:
    request_id = request_context["request_id"]
    params = request.query_params
    require_params(params, CREDENTIAL_PARAMS + (PARAM_RECORD_ID,))
    credentials = _credentials_from(params)
    record_id = params[PARAM_RECORD_ID]

    logger.info(
        f"Deleting DNS record {record_id} [{request_id}]",
        extra=format_logger_context(request_id, "dns.delete", zone_id=credentials.zone_id),
    )
    with measure_time("delete DNS record", request_id):
        result = await dns.delete_record(credentials, record_id)
    return _passthrough(result)


# ============================================================================
# WORKERS (mocked)
# ============================================================================

@router.get(WORKERS_PATH, response_model=WorkerListResponse, summary="List workers")
async def list_workers(
    workers: IWorkersProvider = Depends(get_workers_provider),
) -> WorkerListResponse:
    return WorkerListResponse(result=await workers.list_workers())


@router.post(
    WORKERS_PATH,
    response_model=WorkerMutationResponse,
    summary="Create worker",
    responses=_ERROR_RESPONSES,
)
async def create_worker(
    request: Request,
    workers: IWorkersProvider = Depends(get_workers_provider),
) -> WorkerMutationResponse:
    body = await _read_json_body(request, "create worker")
    result = await workers.create_worker(body)
    return WorkerMutationResponse(result=result, message="Worker created successfully")


@router.put(
    WORKERS_PATH,
    response_model=WorkerMutationResponse,
    summary="Update worker",
    responses=_ERROR_RESPONSES,
)
async def update_worker(
    request: Request,
    workers: IWorkersProvider = Depends(get_workers_provider),
) -> WorkerMutationResponse:
    body = await _read_json_body(request, "update worker")
    result = await workers.update_worker(body)
    return WorkerMutationResponse(result=result, message="Worker updated successfully")


@router.delete(
    WORKERS_PATH,
    response_model=WorkerDeleteResponse,
    summary="Delete worker",
    responses=_ERROR_RESPONSES,
)
async def delete_worker(
    request: Request,
    workers: IWorkersProvider = Depends(get_workers_provider),
) -> WorkerDeleteResponse:
    params = request.query_params
    require_params(params, (PARAM_WORKER_ID,))
    deleted_id = await workers.delete_worker(params[PARAM_WORKER_ID])
    return WorkerDeleteResponse(id=deleted_id, message="Worker deleted successfully")


@router.post(
    DEPLOY_WORKER_PATH,
    response_model=DeployWorkerResponse,
    summary="Deploy worker code",
    description="Body: {workerName, code, environmentVars?}. Nothing is compiled or run.",
    responses=_ERROR_RESPONSES,
)
async def deploy_worker(
    request: Request,
    workers: IWorkersProvider = Depends(get_workers_provider),
    request_context: dict = Depends(get_request_context),
) -> DeployWorkerResponse:
    request_id = request_context["request_id"]
    body = await _read_json_body(request, "deploy worker")
    require_params(body, (PARAM_WORKER_NAME, PARAM_CODE))

    name = str(body[PARAM_WORKER_NAME])
    env_vars = body.get(PARAM_ENVIRONMENT_VARS)
    url = await workers.deploy(
        name,
        str(body[PARAM_CODE]),
        environment_vars=env_vars if isinstance(env_vars, dict) else None,
    )

    logger.info(
        f"Worker {name} deployed at {url} [{request_id}]",
        extra=format_logger_context(request_id, "workers.deploy", worker_name=name),
    )
    return DeployWorkerResponse(message=f"Worker {name} deployed successfully", url=url)


# ============================================================================
# TRAFFIC (mocked)
# ============================================================================

@router.get(
    TRAFFIC_PATH,
    response_model=TrafficResponse,
    summary="Daily traffic analytics (last 30 days)",
    responses=_ERROR_RESPONSES,
)
async def get_traffic(
    request: Request,
    analytics: IAnalyticsProvider = Depends(get_analytics_provider),
) -> TrafficResponse:
    params = request.query_params
    require_params(params, CREDENTIAL_PARAMS)
    zones = await analytics.daily_traffic(_credentials_from(params))
    return TrafficResponse(
        result=TrafficResult(data=TrafficData(viewer=TrafficViewer(zones=zones)))
    )


# ============================================================================
# FALLBACKS: unknown API routes, dashboard document
# ============================================================================

@lru_cache(maxsize=1)
def load_dashboard() -> str:
    """Read the bundled dashboard document once."""
    return (_STATIC_DIR / DASHBOARD_FILENAME).read_text(encoding="utf-8")


async def api_not_found(request: Request) -> PlainTextResponse:
    return PlainTextResponse("Not Found", status_code=404)


async def dashboard(request: Request) -> HTMLResponse:
    return HTMLResponse(load_dashboard(), headers=CORS_HEADERS)


# No method list: every verb matches
fallback_router.add_route(API_PREFIX + "/{rest:path}", api_not_found, include_in_schema=False)
fallback_router.add_route("/{full_path:path}", dashboard, include_in_schema=False)

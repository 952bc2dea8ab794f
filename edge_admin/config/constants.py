"""
================================================================================
FILE: edge_admin/config/constants.py
================================================================================

PURPOSE:
    Fixed protocol values shared by the router, providers and dashboard:
    API paths, upstream auth header names, CORS allow-lists and the canned
    data returned by the mocked subsystems.

KEY FACTS:
    - No computation, just literal values
    - No imports from other edge_admin modules (prevent circular deps)
    - Values an operator may tune belong in settings.py instead
"""

# ================================================================================
# API CONFIGURATION
# ================================================================================

API_PREFIX = "/api"
API_TITLE = "Edge Admin"
API_DESCRIPTION = "DNS record proxy and operator dashboard for the edge provider"
API_VERSION = "1.0.0"

DNS_RECORDS_PATH = "/dns-records"
WORKERS_PATH = "/workers"
TRAFFIC_PATH = "/traffic"
DEPLOY_WORKER_PATH = "/deploy-worker"

REQUEST_ID_HEADER = "X-Request-ID"

# ================================================================================
# REQUEST PARAMETERS
# ================================================================================

PARAM_ZONE_ID = "zoneId"
PARAM_ACCOUNT_ID = "cfId"
PARAM_API_KEY = "apiKey"
PARAM_RECORD = "record"
PARAM_RECORD_ID = "recordId"
PARAM_WORKER_ID = "workerId"
PARAM_WORKER_NAME = "workerName"
PARAM_CODE = "code"
PARAM_ENVIRONMENT_VARS = "environmentVars"

CREDENTIAL_PARAMS = (PARAM_ZONE_ID, PARAM_ACCOUNT_ID, PARAM_API_KEY)

# ================================================================================
# UPSTREAM AUTHENTICATION
# ================================================================================

AUTH_EMAIL_HEADER = "X-Auth-Email"
AUTH_KEY_HEADER = "X-Auth-Key"

# ================================================================================
# CORS
# ================================================================================

CORS_ALLOW_ORIGIN = "*"
CORS_ALLOW_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_ALLOW_HEADERS = ["Content-Type", "Authorization"]

CORS_HEADERS = {
    "Access-Control-Allow-Origin": CORS_ALLOW_ORIGIN,
    "Access-Control-Allow-Methods": ", ".join(CORS_ALLOW_METHODS),
    "Access-Control-Allow-Headers": ", ".join(CORS_ALLOW_HEADERS),
}

# ================================================================================
# MOCKED SUBSYSTEMS
# ================================================================================

MOCK_WORKERS = (
    {"id": "worker1", "name": "api-proxy", "created_on": "2024-01-01T00:00:00Z"},
    {"id": "worker2", "name": "auth-worker", "created_on": "2024-01-02T00:00:00Z"},
)

TRAFFIC_HISTORY_DAYS = 30

# Exclusive upper bounds for the random daily counters
TRAFFIC_MAX_BYTES = 1_000_000_000
TRAFFIC_MAX_REQUESTS = 100_000
TRAFFIC_MAX_CACHED_BYTES = 500_000_000
TRAFFIC_MAX_CACHED_REQUESTS = 50_000

# ================================================================================
# DASHBOARD
# ================================================================================

DASHBOARD_FILENAME = "dashboard.html"

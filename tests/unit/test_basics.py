from __future__ import annotations

import pytest
from pydantic import ValidationError

from edge_admin.api.models import DeployWorkerResponse, ErrorResponse
from edge_admin.config.settings import Settings
from edge_admin.core.exceptions import (
    EdgeAdminException,
    MissingParametersError,
    RequestBodyError,
    UpstreamError,
)
from edge_admin.utils import find_missing_params, require_params

NAMES = ("zoneId", "cfId", "apiKey")


# ----------------------------------------------------------------------------
# Parameter presence
# ----------------------------------------------------------------------------


@pytest.mark.parametrize(
    "source, expected",
    [
        ({"zoneId": "z", "cfId": "c", "apiKey": "k"}, []),
        ({"zoneId": "z", "cfId": "", "apiKey": None}, ["cfId", "apiKey"]),
        ({"apiKey": "k"}, ["zoneId", "cfId"]),
        ({"zoneId": "0", "cfId": " ", "apiKey": {}}, []),
        ({"zoneId": 0, "cfId": False, "apiKey": []}, []),
        ([], list(NAMES)),
        (None, list(NAMES)),
        ("zoneId", list(NAMES)),
    ],
)
def test_find_missing_params_is_presence_only(source, expected) -> None:
    assert find_missing_params(source, NAMES) == expected


def test_require_params_raises_with_missing_names() -> None:
    with pytest.raises(MissingParametersError) as exc_info:
        require_params({"cfId": "c"}, NAMES)

    exc = exc_info.value
    assert exc.missing == ["zoneId", "apiKey"]
    assert exc.status_code == 400
    assert exc.to_dict() == {
        "success": False,
        "error": "Missing required parameters: zoneId, apiKey",
    }


def test_require_params_passes_when_complete() -> None:
    require_params({"zoneId": "z", "cfId": "c", "apiKey": "k"}, NAMES)


# ----------------------------------------------------------------------------
# Exceptions
# ----------------------------------------------------------------------------


def test_exception_status_codes() -> None:
    assert EdgeAdminException("x").status_code == 500
    assert EdgeAdminException("x", status_code=503).status_code == 503
    assert UpstreamError("x", upstream_status=404).status_code == 500
    assert RequestBodyError("x").error_code == "INVALID_BODY"


def test_exception_str_is_client_message() -> None:
    exc = UpstreamError("Failed to fetch DNS records: HTTP 500: Internal Server Error")

    assert str(exc) == "Failed to fetch DNS records: HTTP 500: Internal Server Error"


# ----------------------------------------------------------------------------
# Settings
# ----------------------------------------------------------------------------


def test_settings_defaults() -> None:
    settings = Settings()

    assert settings.upstream_api_base == "https://api.cloudflare.com/client/v4"
    assert settings.upstream_timeout == 30.0
    assert settings.workers_dev_domain == "workers.dev"
    assert settings.dns_provider == "cloudflare"


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("UPSTREAM_TIMEOUT", "2.5")
    monkeypatch.setenv("UPSTREAM_API_BASE", "http://localhost:9000/")
    monkeypatch.setenv("LOG_FORMAT", "json")

    settings = Settings()

    assert settings.upstream_timeout == 2.5
    assert settings.upstream_api_base == "http://localhost:9000"
    assert settings.log_format == "json"


@pytest.mark.parametrize(
    "overrides",
    [
        {"upstream_timeout": 0},
        {"upstream_timeout": -1},
        {"upstream_api_base": "api.cloudflare.com/client/v4"},
        {"workers_dev_domain": " . "},
        {"dns_provider": "route53"},
    ],
)
def test_settings_reject_invalid_values(overrides) -> None:
    with pytest.raises(ValidationError):
        Settings(**overrides)


def test_upstream_config_matches_provider_config_fields() -> None:
    settings = Settings(upstream_timeout=12)

    assert settings.get_upstream_config() == {
        "api_base": "https://api.cloudflare.com/client/v4",
        "timeout_s": 12.0,
    }


# ----------------------------------------------------------------------------
# Response models
# ----------------------------------------------------------------------------


def test_response_models_publish_schema_examples() -> None:
    error_example = ErrorResponse.model_json_schema()["example"]
    deploy_example = DeployWorkerResponse.model_json_schema()["example"]

    assert ErrorResponse(**error_example).success is False
    assert DeployWorkerResponse(**deploy_example).url == "https://foo.workers.dev"

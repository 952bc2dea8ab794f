"""
================================================================================
FILE: edge_admin/config/settings.py
================================================================================

PURPOSE:
    Application settings loaded from environment variables and .env.
    Uses Pydantic BaseSettings for automatic validation and type hints.
    Single source of truth for everything an operator may tune at deploy time.

WORKFLOW:
    1. At startup, load from environment variables (.env file or system env)
    2. Validate all settings (type checking, range validation)
    3. Fail fast if a setting is invalid
    4. Cache settings in memory (zero I/O after startup)
    5. Access throughout app via: settings.upstream_api_base, etc.

INPUTS:
    - Environment variables (from .env file or system env)
    - Examples:
        UPSTREAM_API_BASE=https://api.cloudflare.com/client/v4
        UPSTREAM_TIMEOUT=30
        SERVER_PORT=8787
        LOG_LEVEL=INFO
        LOG_FORMAT=json

CONFIGURATION CATEGORIES:
    1. Providers
       - dns_provider: upstream DNS provider module (cloudflare)
       - workers_provider / analytics_provider: canned providers (mock)

    2. Upstream
       - upstream_api_base: REST base URL of the DNS/edge provider
       - upstream_timeout: max seconds for one upstream call (no retries)
       - workers_dev_domain: domain used to build deployed worker URLs

    3. Server Configuration
       - server_host / server_port

    4. Logging / Environment
       - log_level, log_format, environment, debug

KEY FACTS:
    - Credentials are NOT settings: zoneId/cfId/apiKey travel with each request
    - Protocol constants (header names, CORS lists) live in constants.py
    - Environment variables override defaults

TESTING ENVIRONMENT:
    - Override settings in tests: Settings(upstream_timeout=5)
"""

from __future__ import annotations

import os

from pathlib import Path
from typing import Any, Dict, Literal

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_CWD_ENV = Path(os.getcwd()) / ".env"
_REPO_ROOT_ENV = Path(__file__).resolve().parents[2] / ".env"
_ENV_PATH = _CWD_ENV if _CWD_ENV.exists() else _REPO_ROOT_ENV

load_dotenv(dotenv_path=_ENV_PATH, override=False)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables + .env.

    All fields have aliases to match .env variable names.
    """

    model_config = SettingsConfigDict(
        env_file=str(_ENV_PATH),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # ========================================================================
    # PROVIDERS
    # ========================================================================

    dns_provider: Literal["cloudflare"] = Field(
        default="cloudflare",
        alias="DNS_PROVIDER",
        description="Upstream DNS provider module",
    )

    workers_provider: Literal["mock"] = Field(
        default="mock",
        alias="WORKERS_PROVIDER",
        description="Workers provider module (canned responses only)",
    )

    analytics_provider: Literal["mock"] = Field(
        default="mock",
        alias="ANALYTICS_PROVIDER",
        description="Traffic analytics provider module (canned responses only)",
    )

    # ========================================================================
    # UPSTREAM
    # ========================================================================

    upstream_api_base: str = Field(
        default="https://api.cloudflare.com/client/v4",
        alias="UPSTREAM_API_BASE",
        description="Base URL of the upstream provider REST API",
    )

    upstream_timeout: float = Field(
        default=30.0,
        gt=0,
        le=300,
        alias="UPSTREAM_TIMEOUT",
        description="Timeout for a single upstream call (seconds)",
    )

    workers_dev_domain: str = Field(
        default="workers.dev",
        alias="WORKERS_DEV_DOMAIN",
        description="Domain appended to worker names for deployed URLs",
    )

    # ========================================================================
    # SERVER
    # ========================================================================

    server_host: str = Field(
        default="0.0.0.0",
        alias="SERVER_HOST",
        description="Server bind host",
    )

    server_port: int = Field(
        default=8787,
        ge=1,
        le=65535,
        alias="SERVER_PORT",
        description="Server bind port",
    )

    # ========================================================================
    # LOGGING / ENVIRONMENT
    # ========================================================================

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        alias="LOG_LEVEL",
        description="Logging level",
    )

    log_format: Literal["json", "text"] = Field(
        default="text",
        alias="LOG_FORMAT",
        description="Logging format: json or text",
    )

    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        alias="ENVIRONMENT",
        description="Environment: development, staging, production",
    )

    debug: bool = Field(
        default=False,
        alias="DEBUG",
        description="Debug mode enabled",
    )

    # ========================================================================
    # VALIDATORS
    # ========================================================================

    @field_validator("upstream_api_base")
    @classmethod
    def _validate_api_base(cls, v: str) -> str:
        """Require an absolute http(s) URL; drop any trailing slash."""
        v = (v or "").strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("UPSTREAM_API_BASE must be an http(s) URL")
        return v.rstrip("/")

    @field_validator("workers_dev_domain")
    @classmethod
    def _validate_workers_domain(cls, v: str) -> str:
        v = (v or "").strip().strip(".")
        if not v:
            raise ValueError("WORKERS_DEV_DOMAIN must be non-empty")
        return v

    # ========================================================================
    # HELPER METHODS
    # ========================================================================

    def get_upstream_config(self) -> Dict[str, Any]:
        """
        Get upstream configuration for ServiceContainer.

        Returns:
            Dict with base URL and timeout
        """
        return {
            "api_base": self.upstream_api_base,
            "timeout_s": self.upstream_timeout,
        }

"""
Domain models shared by providers and API envelopes.

Field names follow the upstream provider's JSON (camelCase where the
provider uses it) through aliases, so responses serialize the way the
dashboard expects.
"""

from datetime import date
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ZoneCredentials(BaseModel):
    """Per-request credentials, forwarded verbatim to the upstream provider."""

    model_config = ConfigDict(frozen=True)

    zone_id: str
    account_email: str = Field(repr=False)
    api_key: str = Field(repr=False)


class Worker(BaseModel):
    """Nominal edge worker. Fabricated by the mock provider."""

    id: str
    name: str
    created_on: str


class TrafficDimensions(BaseModel):
    datetime: date


class TrafficSum(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    bytes: int = Field(..., ge=0)
    requests: int = Field(..., ge=0)
    cached_bytes: int = Field(..., ge=0, alias="cachedBytes")
    cached_requests: int = Field(..., ge=0, alias="cachedRequests")


class TrafficDay(BaseModel):
    """One httpRequests1dGroups entry."""

    dimensions: TrafficDimensions
    sum: TrafficSum


class TrafficZone(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    http_requests_1d_groups: List[TrafficDay] = Field(
        default_factory=list, alias="httpRequests1dGroups"
    )

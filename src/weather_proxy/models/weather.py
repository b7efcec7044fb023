"""Weather proxy models.

The upstream payload is opaque to this service: it is parsed as JSON and
passed through unchanged. What the service does model is the query it sends
and the outcome of sending it.

## Result Type

A proxy call yields exactly one of:

- `WeatherPayload` - the upstream answered 2xx with a JSON body
- `WeatherFailure` - anything else, tagged with a `FailureKind`

Both serialise to the wire shape the browser expects via `to_content()`:
the raw upstream JSON, or `{"error": <message>}`.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal, Union

import httpx
from pydantic import BaseModel, Field

from weather_proxy.config import Settings


class FailureKind(str, Enum):
    """Why a proxy call did not produce a payload."""

    NETWORK = "network"
    UPSTREAM_STATUS = "upstream_status"
    INVALID_BODY = "invalid_body"


class UpstreamQuery(BaseModel):
    """Parameters of a weatherapi.com current-conditions request."""

    location: str = Field(..., min_length=1, description="Location query (zip, city, lat,lon)")
    aqi: bool = Field(default=False, description="Include air-quality data")
    base_url: str = "http://api.weatherapi.com/v1"

    @classmethod
    def from_settings(cls, settings: Settings) -> UpstreamQuery:
        """Build the configured query."""
        return cls(
            location=settings.weather_location,
            aqi=settings.weather_aqi,
            base_url=settings.weather_api_base_url,
        )

    @property
    def aqi_flag(self) -> str:
        return "yes" if self.aqi else "no"

    def params(self, api_key: str) -> dict[str, str]:
        """Query string parameters, in upstream order."""
        return {"key": api_key, "q": self.location, "aqi": self.aqi_flag}

    def url(self, api_key: str) -> str:
        """Full upstream URL including the key.

        The result contains the secret; do not log it.
        """
        endpoint = f"{self.base_url.rstrip('/')}/current.json"
        return str(httpx.URL(endpoint, params=self.params(api_key)))


class WeatherPayload(BaseModel):
    """Successful upstream response, passed through verbatim."""

    ok: Literal[True] = True
    data: Any

    def to_content(self) -> Any:
        return self.data


class WeatherFailure(BaseModel):
    """Failed proxy call."""

    ok: Literal[False] = False
    kind: FailureKind
    message: str = Field(..., min_length=1)
    status_code: int | None = Field(
        default=None, description="Upstream HTTP status, for UPSTREAM_STATUS failures"
    )

    def to_content(self) -> dict[str, str]:
        return {"error": self.message}


WeatherResult = Union[WeatherPayload, WeatherFailure]

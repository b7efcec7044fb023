"""WeatherAPI.com provider.

## API Documentation Summary
Source: https://www.weatherapi.com/docs/

## Endpoint
- Base URL: http://api.weatherapi.com/v1
- Current conditions: /current.json
- Full URL example: http://api.weatherapi.com/v1/current.json?key=YOUR_KEY&q=29203&aqi=no

## Authentication
- API key required, passed as the `key` query parameter
- The key must stay server-side; the browser only ever sees this service

## Request Parameters
| Parameter | Description |
|-----------|-------------|
| key | API key |
| q | US zip, UK postcode, city name, lat,lon, IP, ... |
| aqi | yes/no - include air-quality block |

## Response Format
```json
{
  "location": {"name": "Columbia", "region": "South Carolina", ...},
  "current": {"temp_c": 21.1, "temp_f": 70.0, "condition": {...}, ...}
}
```

The body is passed through untouched; this service does not depend on its
schema.
"""

from __future__ import annotations

from weather_proxy.models.weather import UpstreamQuery, WeatherPayload, WeatherResult
from weather_proxy.providers.base import WeatherProvider


class WeatherApiProvider(WeatherProvider):
    """Proxy for the weatherapi.com current-conditions endpoint."""

    name = "weatherapi"

    def build_url(self, query: UpstreamQuery) -> str:
        """Return the upstream URL for a query, key included."""
        return query.url(self._api_key)

    async def _get_current(self, query: UpstreamQuery) -> WeatherResult:
        response = await self._fetch(self.build_url(query))
        return WeatherPayload(data=self._parse_json(response))

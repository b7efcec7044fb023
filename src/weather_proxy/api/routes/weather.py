"""Weather proxy route.

Forwards a current-conditions request to the upstream provider with the
server-side API key and returns its JSON unchanged. Failures are returned as
`{"error": <message>}` with the configured `error_status_code`.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from weather_proxy.api.dependencies import get_upstream_query, get_weather_provider
from weather_proxy.config import Settings, get_settings
from weather_proxy.models.weather import UpstreamQuery, WeatherFailure
from weather_proxy.providers import WeatherProvider

router = APIRouter()


@router.get("")
async def get_current_weather(
    provider: WeatherProvider = Depends(get_weather_provider),
    query: UpstreamQuery = Depends(get_upstream_query),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """Proxy current conditions for the configured location."""
    result = await provider.get_current(query)

    if isinstance(result, WeatherFailure):
        return JSONResponse(
            content=result.to_content(),
            status_code=settings.error_status_code,
        )

    return JSONResponse(content=result.to_content())

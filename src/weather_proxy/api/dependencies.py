"""FastAPI dependencies.

The weather provider is built once in the application lifespan, with the API
key injected from settings, and stored on `app.state`. Routes receive it
through `Depends` so tests can swap it via `app.dependency_overrides`.

## Usage

```python
from fastapi import Depends
from weather_proxy.api.dependencies import get_weather_provider

@router.get("/")
async def current(provider: WeatherProvider = Depends(get_weather_provider)):
    ...
```
"""

from __future__ import annotations

from fastapi import Depends, Request

from weather_proxy.config import Settings, get_settings
from weather_proxy.models.weather import UpstreamQuery
from weather_proxy.providers import WeatherApiProvider, WeatherProvider


def build_weather_provider(settings: Settings) -> WeatherProvider:
    """Create the upstream provider with the configured secret."""
    return WeatherApiProvider(
        api_key=settings.weather_api_key.get_secret_value(),
        timeout=settings.upstream_timeout,
    )


def get_weather_provider(request: Request) -> WeatherProvider:
    """Return the provider created at startup."""
    return request.app.state.weather_provider


def get_upstream_query(settings: Settings = Depends(get_settings)) -> UpstreamQuery:
    """Return the configured upstream query."""
    return UpstreamQuery.from_settings(settings)

"""Weather data providers."""

from weather_proxy.providers.base import (
    InvalidResponseError,
    ProviderError,
    UpstreamConnectionError,
    UpstreamStatusError,
    WeatherProvider,
)
from weather_proxy.providers.weatherapi import WeatherApiProvider

__all__ = [
    "WeatherProvider",
    "ProviderError",
    "UpstreamConnectionError",
    "UpstreamStatusError",
    "InvalidResponseError",
    "WeatherApiProvider",
]

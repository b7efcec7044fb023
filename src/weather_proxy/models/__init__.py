"""Data models for the weather proxy."""

from weather_proxy.models.site import (
    LinkTag,
    MetaTag,
    SiteHead,
    default_site_head,
    is_custom_element,
)
from weather_proxy.models.weather import (
    FailureKind,
    UpstreamQuery,
    WeatherFailure,
    WeatherPayload,
    WeatherResult,
)

__all__ = [
    # Site
    "LinkTag",
    "MetaTag",
    "SiteHead",
    "default_site_head",
    "is_custom_element",
    # Weather
    "FailureKind",
    "UpstreamQuery",
    "WeatherFailure",
    "WeatherPayload",
    "WeatherResult",
]

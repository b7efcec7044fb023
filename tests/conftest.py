"""Pytest fixtures for weather proxy tests.

This module provides test fixtures that ensure:
1. No external API calls are made (the upstream is an httpx.MockTransport)
2. Isolated test environment with controlled configuration
"""

import asyncio
import os
from typing import Any, Callable

import httpx
import pytest

# Set test environment BEFORE importing application modules
os.environ.setdefault("WEATHER_API_KEY", "test-weather-key")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

from weather_proxy.models.weather import UpstreamQuery
from weather_proxy.providers import WeatherApiProvider


TEST_API_KEY = os.environ["WEATHER_API_KEY"]


class FakeUpstream:
    """Records outbound requests and answers them with a canned handler."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.handler = handler
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def provider(self, api_key: str = TEST_API_KEY) -> WeatherApiProvider:
        client = httpx.AsyncClient(transport=httpx.MockTransport(self))
        return WeatherApiProvider(api_key=api_key, client=client)


def run_current(provider: WeatherApiProvider, query: UpstreamQuery) -> Any:
    """Run a single get_current() call to completion."""

    async def _run():
        async with provider:
            return await provider.get_current(query)

    return asyncio.run(_run())


# =============================================================================
# Test Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Reset settings cache before each test to ensure clean state."""
    from weather_proxy.config import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def default_query() -> UpstreamQuery:
    """The query the service sends out of the box."""
    return UpstreamQuery(location="29203", aqi=False)


@pytest.fixture
def sample_current_payload() -> dict[str, Any]:
    """Trimmed weatherapi.com current.json response."""
    return {
        "location": {
            "name": "Columbia",
            "region": "South Carolina",
            "country": "United States of America",
            "lat": 34.04,
            "lon": -81.01,
            "tz_id": "America/New_York",
        },
        "current": {
            "temp_c": 21.1,
            "temp_f": 70.0,
            "is_day": 1,
            "condition": {"text": "Partly cloudy", "code": 1003},
            "wind_mph": 5.6,
            "humidity": 48,
        },
    }


@pytest.fixture
def ok_upstream(sample_current_payload) -> FakeUpstream:
    """Upstream that answers 200 with a sample payload."""
    return FakeUpstream(lambda request: httpx.Response(200, json=sample_current_payload))


@pytest.fixture
def unavailable_upstream() -> FakeUpstream:
    """Upstream that answers 503 Service Unavailable."""
    return FakeUpstream(lambda request: httpx.Response(503, text="down"))


@pytest.fixture
def unreachable_upstream() -> FakeUpstream:
    """Upstream that cannot be connected to."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    return FakeUpstream(handler)

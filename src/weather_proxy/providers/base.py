"""Base weather provider abstraction.

A provider owns the HTTP client used to talk to an upstream weather API and
turns each call into a `WeatherResult`. Providers never let an upstream fault
escape: inside the provider the fetch path raises `ProviderError` subclasses,
and `get_current()` converts them to `WeatherFailure` values at its boundary.

## Error Hierarchy

| Exception | FailureKind | Raised when |
|-----------|-------------|-------------|
| UpstreamConnectionError | NETWORK | No response (DNS, refused, reset, timeout) |
| UpstreamStatusError | UPSTREAM_STATUS | Final response (after redirects) is non-2xx |
| InvalidResponseError | INVALID_BODY | 2xx body is not strict JSON (NaN/Infinity rejected) |

## Client Lifecycle

The provider lazily creates one `httpx.AsyncClient` and reuses it for every
call. Use it as an async context manager, or call `aclose()` on shutdown:

```python
async with WeatherApiProvider(api_key="...") as provider:
    result = await provider.get_current(query)
```
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx

from weather_proxy.models.weather import (
    FailureKind,
    UpstreamQuery,
    WeatherFailure,
    WeatherResult,
)

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Failed to fetch weather data"


def quiet_http_client_logging() -> None:
    """Raise the httpx logger to WARNING.

    httpx logs every request URL at INFO, and upstream URLs carry the API key.
    """
    logging.getLogger("httpx").setLevel(logging.WARNING)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Out of range float value {name!r}")


class ProviderError(Exception):
    """Base exception for weather provider errors."""

    kind: FailureKind = FailureKind.NETWORK

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message or DEFAULT_ERROR_MESSAGE
        self.status_code = status_code

    def to_failure(self) -> WeatherFailure:
        """Convert to the result value returned to callers."""
        return WeatherFailure(
            kind=self.kind,
            message=self.message,
            status_code=self.status_code,
        )


class UpstreamConnectionError(ProviderError):
    """Raised when no response was received from the upstream."""

    kind = FailureKind.NETWORK


class UpstreamStatusError(ProviderError):
    """Raised when the upstream answers with a non-success status."""

    kind = FailureKind.UPSTREAM_STATUS


class InvalidResponseError(ProviderError):
    """Raised when a success response cannot be parsed."""

    kind = FailureKind.INVALID_BODY


class WeatherProvider(ABC):
    """Abstract base class for weather data providers.

    Attributes:
        name: Human-readable provider name
    """

    name: str

    def __init__(
        self,
        api_key: str = "",
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        """Initialize the provider.

        Args:
            api_key: API key sent to the upstream
            timeout: Request timeout in seconds, None to wait indefinitely
            client: Pre-built client (tests inject one with a mock transport)
        """
        self._api_key = api_key
        self.timeout = timeout
        self._client = client

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, timeout={self.timeout!r})"

    async def __aenter__(self) -> WeatherProvider:
        """Enter async context manager."""
        self._get_client()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit async context manager."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout, follow_redirects=True)
        return self._client

    def _redact(self, text: str) -> str:
        """Remove the API key, raw or URL-encoded, from text bound for logs or clients."""
        if not self._api_key:
            return text
        encoded = str(httpx.QueryParams({"k": self._api_key}))[len("k="):]
        for form in {self._api_key, encoded}:
            text = text.replace(form, "***")
        return text

    async def _fetch(self, url: str) -> httpx.Response:
        """Issue a single GET request, following redirects.

        One attempt per call; failures are not retried.

        Raises:
            UpstreamConnectionError: If no response was received
            UpstreamStatusError: If the final response status is not 2xx
        """
        client = self._get_client()
        try:
            response = await client.get(url, follow_redirects=True)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise UpstreamConnectionError(self._redact(str(exc))) from exc

        if not response.is_success:
            reason = response.reason_phrase or str(response.status_code)
            raise UpstreamStatusError(
                f"API Error: {reason}",
                status_code=response.status_code,
            )

        return response

    def _parse_json(self, response: httpx.Response) -> Any:
        """Parse a response body as strict JSON.

        Raises:
            InvalidResponseError: If the body is not valid JSON, including
                the non-standard NaN, Infinity and -Infinity constants
        """
        try:
            return json.loads(response.content, parse_constant=_reject_constant)
        except ValueError as exc:
            raise InvalidResponseError(
                f"Invalid JSON from upstream: {exc}",
                status_code=response.status_code,
            ) from exc

    async def get_current(self, query: UpstreamQuery) -> WeatherResult:
        """Get current conditions, never raising for upstream faults.

        Args:
            query: Location and options to send upstream

        Returns:
            WeatherPayload on success, WeatherFailure otherwise
        """
        try:
            return await self._get_current(query)
        except ProviderError as exc:
            failure = exc.to_failure()
            logger.error(
                "%s request failed (%s): %s",
                self.name,
                failure.kind.value,
                failure.message,
            )
            return failure

    @abstractmethod
    async def _get_current(self, query: UpstreamQuery) -> WeatherResult:
        """Fetch current conditions.

        Implementations raise `ProviderError` subclasses on failure.
        """
        pass

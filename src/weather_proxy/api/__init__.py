"""FastAPI application and routes.

This module provides the HTTP API for the weather proxy.

## API Structure

- /api/weather - Current conditions, proxied from weatherapi.com
- /api/site - Document head metadata for the front end
- /health - Liveness check

## Security

The weatherapi.com key is read from the environment at startup and only ever
sent upstream. It is not included in responses or log output.
"""

from weather_proxy.api.app import create_app

__all__ = ["create_app"]

"""FastAPI application factory.

Creates and configures the FastAPI application with all routes and middleware.

## Usage

```python
from weather_proxy.api import create_app

app = create_app()

# Run with uvicorn
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
```

## Configuration

The app is configured via environment variables. See `weather_proxy.config`
for available settings.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from weather_proxy.api.dependencies import build_weather_provider
from weather_proxy.config import get_settings
from weather_proxy.providers.base import quiet_http_client_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Handles startup and shutdown tasks:
    - Keep keyed upstream URLs out of httpx logs
    - Create the upstream weather provider
    - Close its HTTP client on shutdown
    """
    settings = get_settings()

    quiet_http_client_logging()

    logger.info(f"Starting {settings.app_name} v{settings.app_version}")

    if not settings.weather_api_configured:
        logger.warning("WEATHER_API_KEY is not set; upstream requests will be rejected")

    app.state.weather_provider = build_weather_provider(settings)

    yield

    # Shutdown
    logger.info("Shutting down")
    await app.state.weather_provider.aclose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Server-side proxy for weatherapi.com current conditions",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Include routers
    from weather_proxy.api.routes import site, weather

    app.include_router(weather.router, prefix="/api/weather", tags=["Weather"])
    app.include_router(site.router, prefix="/api/site", tags=["Site"])

    # Health check endpoint
    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "version": settings.app_version}

    return app

"""Application configuration.

Configuration is loaded from environment variables using pydantic-settings.
The weather API key must be provided via the environment (or a local `.env`
file), never committed to a config file, and never sent to the browser.

## Environment Variables

- WEATHER_API_KEY: weatherapi.com key (NUXT_WEATHER_API_KEY is also accepted)
- WEATHER_API_BASE_URL: Upstream base URL (default: http://api.weatherapi.com/v1)
- WEATHER_LOCATION: Location query sent upstream (default: 29203)
- WEATHER_AQI: Request air-quality data (default: false)
- UPSTREAM_TIMEOUT: Upstream timeout in seconds (default: none)
- ERROR_STATUS_CODE: HTTP status for failed proxy calls (default: 200)
- LOG_LEVEL: Root log level for the CLI (default: INFO)

## Example .env file

```
WEATHER_API_KEY=your-weatherapi-key
WEATHER_LOCATION=29203
```
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Weather Proxy"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    allowed_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:8000"],
        description="CORS allowed origins",
    )

    # Upstream weather provider
    weather_api_key: SecretStr = Field(
        default=SecretStr(""),
        validation_alias=AliasChoices("weather_api_key", "nuxt_weather_api_key"),
        description="weatherapi.com API key, server-side only",
    )
    weather_api_base_url: str = "http://api.weatherapi.com/v1"
    weather_location: str = "29203"
    weather_aqi: bool = False
    upstream_timeout: float | None = Field(
        default=None,
        gt=0,
        description="Upstream timeout in seconds (None waits indefinitely)",
    )
    error_status_code: int = Field(
        default=200,
        ge=200,
        le=599,
        description="HTTP status returned with an {'error': ...} body",
    )

    # Site shell
    site_title: str = "Hello, I'm Louis Rozier"
    site_description: str = ""

    @field_validator("weather_api_base_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalise the base URL so paths can be appended with '/'."""
        return v.rstrip("/") if isinstance(v, str) else v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalise_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def weather_api_configured(self) -> bool:
        """Check if a weather API key has been supplied."""
        return bool(self.weather_api_key.get_secret_value())


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are loaded once and cached. To reload, clear the cache:
    ```python
    get_settings.cache_clear()
    ```
    """
    return Settings()

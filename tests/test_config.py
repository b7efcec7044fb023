"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from weather_proxy.config import Settings, get_settings


class TestSettings:
    """Tests for Settings loading."""

    def test_defaults(self, monkeypatch):
        """Test upstream defaults match the deployed service."""
        monkeypatch.delenv("WEATHER_API_KEY", raising=False)
        settings = Settings(_env_file=None)

        assert settings.weather_api_base_url == "http://api.weatherapi.com/v1"
        assert settings.weather_location == "29203"
        assert settings.weather_aqi is False
        assert settings.upstream_timeout is None
        assert settings.error_status_code == 200
        assert settings.weather_api_key.get_secret_value() == ""
        assert settings.weather_api_configured is False

    def test_api_key_from_env(self, monkeypatch):
        """Test the key is read from WEATHER_API_KEY."""
        monkeypatch.setenv("WEATHER_API_KEY", "abc123")
        settings = Settings(_env_file=None)
        assert settings.weather_api_key.get_secret_value() == "abc123"
        assert settings.weather_api_configured is True

    def test_nuxt_alias(self, monkeypatch):
        """Test the legacy NUXT_WEATHER_API_KEY variable is accepted."""
        monkeypatch.delenv("WEATHER_API_KEY", raising=False)
        monkeypatch.setenv("NUXT_WEATHER_API_KEY", "legacy-key")
        settings = Settings(_env_file=None)
        assert settings.weather_api_key.get_secret_value() == "legacy-key"

    def test_secret_masked_in_repr(self, monkeypatch):
        """Test the key never shows up when settings are printed."""
        monkeypatch.setenv("WEATHER_API_KEY", "super-secret-value")
        settings = Settings(_env_file=None)
        assert "super-secret-value" not in repr(settings)
        assert "super-secret-value" not in str(settings.model_dump())

    def test_base_url_trailing_slash_stripped(self):
        settings = Settings(_env_file=None, weather_api_base_url="http://example.test/v1/")
        assert settings.weather_api_base_url == "http://example.test/v1"

    def test_log_level_upper_cased(self):
        settings = Settings(_env_file=None, log_level="debug")
        assert settings.log_level == "DEBUG"

    def test_invalid_error_status_rejected(self):
        """Test error status must be a valid HTTP status."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, error_status_code=99)

    def test_non_positive_timeout_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, upstream_timeout=0)

    def test_get_settings_is_cached(self):
        """Test settings are loaded once."""
        assert get_settings() is get_settings()

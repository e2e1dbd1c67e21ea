"""Unit tests for API settings."""

import pytest
from pydantic import ValidationError

from mallu_api.config.settings import APISettings


class TestAPISettings:
    """Tests for APISettings."""

    def test_defaults(self):
        settings = APISettings()

        assert settings.port == 8000
        assert settings.log_level == "INFO"
        assert settings.enable_rate_limit is True
        assert settings.metrics_path == "/metrics"

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("MALLU_API_PORT", "9001")
        monkeypatch.setenv("MALLU_API_LOG_FORMAT", "text")

        settings = APISettings()

        assert settings.port == 9001
        assert settings.log_format == "text"

    def test_log_level_normalized(self):
        assert APISettings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            APISettings(log_level="chatty")

    def test_unknown_log_format_rejected(self):
        with pytest.raises(ValidationError):
            APISettings(log_format="xml")

    def test_rate_limit_must_be_positive(self):
        with pytest.raises(ValidationError):
            APISettings(rate_limit_requests=0)

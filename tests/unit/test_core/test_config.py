"""Unit tests for application settings."""

import logging

import pytest
from pydantic import ValidationError as PydanticValidationError

from naviksha.core.config import Settings, get_settings
from naviksha.schemas.career_schemas import ScoringWeights
from naviksha.utils.exceptions import ConfigurationError


@pytest.fixture
def clear_settings_cache():
    """Reset the cached settings around a test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    """Test settings loading and validation."""

    def test_defaults(self):
        """Test the production scoring defaults."""
        settings = Settings(APP_ENV="test")

        assert settings.RIASEC_MAX_SCORE == 42.0
        assert settings.REPORT_TOP_BUCKETS == 5
        assert settings.get_scoring_weights() == ScoringWeights()
        assert settings.is_test()
        assert not settings.is_production()

    def test_environment_override(self, monkeypatch):
        """Test values are read from the environment."""
        monkeypatch.setenv("RIASEC_WEIGHT", "0.5")
        monkeypatch.setenv("RIASEC_MAX_SCORE", "56")

        settings = Settings()

        assert settings.RIASEC_WEIGHT == 0.5
        assert settings.RIASEC_MAX_SCORE == 56.0
        assert settings.get_scoring_weights().riasec_weight == 0.5

    def test_invalid_environment(self):
        """Test unknown environments are rejected."""
        with pytest.raises(PydanticValidationError):
            Settings(APP_ENV="qa")

    def test_negative_weight(self):
        """Test negative weights are rejected."""
        with pytest.raises(PydanticValidationError):
            Settings(CONTEXT_WEIGHT=-1)

    def test_non_positive_max_score(self):
        """Test the RIASEC maximum must be positive."""
        with pytest.raises(PydanticValidationError):
            Settings(RIASEC_MAX_SCORE=0)

    def test_weight_total_warning(self, caplog):
        """Test weights not summing to one are accepted with a warning."""
        with caplog.at_level(logging.WARNING):
            settings = Settings(APP_ENV="test", RIASEC_WEIGHT=0.9)

        assert settings.get_scoring_weights().total == pytest.approx(1.5)
        assert "Scoring weights do not sum to 1.0" in caplog.text


class TestGetSettings:
    """Test the cached settings accessor."""

    def test_cached(self, clear_settings_cache):
        """Test the same instance is returned."""
        assert get_settings() is get_settings()

    def test_invalid_environment_raises_configuration_error(self, monkeypatch, clear_settings_cache):
        """Test invalid environment values surface as ConfigurationError."""
        monkeypatch.setenv("LOG_LEVEL", "VERBOSE")

        with pytest.raises(ConfigurationError) as exc_info:
            get_settings()

        assert exc_info.value.setting == "LOG_LEVEL"
        assert exc_info.value.error_code == "CONFIGURATION_ERROR"

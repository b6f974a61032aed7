"""Tests for library Settings helpers."""

import pytest

from driver_settings.config.settings import (
    ENVIRONMENT_VARIABLE,
    LOG_LEVEL_VARIABLE,
    Environment,
    LogLevel,
    Settings,
    build_settings,
)


@pytest.fixture
def default_settings():
    """Provide default Settings for comparison."""
    return Settings()


class TestBuildSettings:
    """Test our build_settings helper logic."""

    def test_filters_none_values(self, default_settings):
        """build_settings ignores None overrides."""
        settings = build_settings(environment=None, log_level=LogLevel.DEBUG)

        assert settings.environment == default_settings.environment
        assert settings.log_level == LogLevel.DEBUG

    def test_applies_all_overrides(self):
        """build_settings applies all non-None overrides."""
        settings = build_settings(
            environment=Environment.PRODUCTION,
            log_level=LogLevel.ERROR,
        )

        assert settings.environment is Environment.PRODUCTION
        assert settings.log_level == LogLevel.ERROR


class TestSettingsFromEnv:
    """Environment variable loading."""

    def test_empty_environment_uses_defaults(self, default_settings):
        """Unset variables fall back to defaults."""
        assert Settings.from_env({}) == default_settings

    def test_reads_variables_case_insensitively(self):
        """Values are normalised before lookup."""
        settings = Settings.from_env(
            {ENVIRONMENT_VARIABLE: "Production", LOG_LEVEL_VARIABLE: "warning"}
        )

        assert settings.environment is Environment.PRODUCTION
        assert settings.log_level == LogLevel.WARNING

    def test_invalid_value_raises(self):
        """Unknown values are not silently ignored."""
        with pytest.raises(ValueError):
            Settings.from_env({LOG_LEVEL_VARIABLE: "LOUD"})

    def test_reads_process_environment(self, monkeypatch):
        """Without an explicit mapping the process environment is used."""
        monkeypatch.setenv(ENVIRONMENT_VARIABLE, "testing")
        monkeypatch.delenv(LOG_LEVEL_VARIABLE, raising=False)

        assert Settings.from_env().environment is Environment.TESTING

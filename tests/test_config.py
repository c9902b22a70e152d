"""Tests for environment-driven configuration."""

import pytest

from rsvp_pacer import config
from rsvp_pacer.core.models import RunConfig


class TestEnvInt:

    def test_default_when_unset(self, monkeypatch):
        monkeypatch.delenv("RSVP_TEST_VALUE", raising=False)
        assert config._env_int("RSVP_TEST_VALUE", 42) == 42

    def test_default_when_blank(self, monkeypatch):
        monkeypatch.setenv("RSVP_TEST_VALUE", "  ")
        assert config._env_int("RSVP_TEST_VALUE", 42) == 42

    def test_parses_integer(self, monkeypatch):
        monkeypatch.setenv("RSVP_TEST_VALUE", " 250 ")
        assert config._env_int("RSVP_TEST_VALUE", 42) == 250

    def test_malformed_names_variable(self, monkeypatch):
        monkeypatch.setenv("RSVP_TEST_VALUE", "fast")
        with pytest.raises(ValueError, match="RSVP_TEST_VALUE"):
            config._env_int("RSVP_TEST_VALUE", 42)


class TestDefaultRunConfig:

    def test_seconds_converted_to_ms(self, monkeypatch):
        monkeypatch.setattr(config, "DEFAULT_START_WPM", 120)
        monkeypatch.setattr(config, "DEFAULT_TARGET_WPM", 480)
        monkeypatch.setattr(config, "DEFAULT_ACCELERATION_S", 4)
        assert config.default_run_config() == RunConfig(
            start_wpm=120, target_wpm=480, acceleration_ms=4_000,
        )

    def test_supported_extensions_lowercase(self):
        assert ".txt" in config.SUPPORTED_TEXT_EXTENSIONS
        assert all(ext == ext.lower() and ext.startswith(".")
                   for ext in config.SUPPORTED_TEXT_EXTENSIONS)

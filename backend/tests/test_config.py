"""
Tests for settings and logging setup.
"""

import logging

import app.core.logging as app_logging
from app.core.config import Settings, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("MAX_SERIES_LENGTH", raising=False)
        monkeypatch.delenv("MIN_HISTORY_LENGTH", raising=False)
        settings = Settings(_env_file=None)

        assert settings.max_series_length == 5000
        assert settings.min_history_length == 1
        assert settings.debug is False

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("MAX_SERIES_LENGTH", "300")
        monkeypatch.setenv("log_level", "debug")
        settings = Settings(_env_file=None)

        assert settings.max_series_length == 300
        assert settings.log_level == "debug"

    def test_cached(self):
        assert get_settings() is get_settings()


class TestLoggingSetup:
    def test_idempotent(self, monkeypatch):
        calls = []
        monkeypatch.setattr(app_logging, "_configured", False)
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))

        app_logging.setup_logging(level="warning")
        app_logging.setup_logging(level="debug")

        assert len(calls) == 1
        assert calls[0]["level"] == "WARNING"

"""Unit tests for application configuration."""

import logging

import pytest

from bibliotheque.application.config import Settings
from bibliotheque.application.logging_config import LOG_FORMAT, configure_logging


def test_settings_defaults(monkeypatch):
    """Test configuration defaults without environment overrides."""
    for name in ("APP_NAME", "LOG_LEVEL", "PARTNER1_NAME", "PARTNER2_NAME", "DEFAULT_GOAL", "TOP_GENRE_LIMIT"):
        monkeypatch.delenv(name, raising=False)

    config = Settings(_env_file=None)

    assert config.app_name == "bibliotheque"
    assert config.log_level == "INFO"
    assert config.partner1_name == "Ian"
    assert config.partner2_name == "Hannah"
    assert config.default_goal == 24
    assert config.top_genre_limit == 3


def test_settings_from_environment(monkeypatch):
    """Test that environment variables override defaults, case-insensitively."""
    monkeypatch.setenv("partner1_name", "Ada")
    monkeypatch.setenv("DEFAULT_GOAL", "52")

    config = Settings(_env_file=None)

    assert config.partner1_name == "Ada"
    assert config.default_goal == 52


def test_settings_reject_bad_numbers(monkeypatch):
    monkeypatch.setenv("DEFAULT_GOAL", "lots")

    with pytest.raises(Exception):  # Pydantic validation error
        Settings(_env_file=None)


def test_configure_logging(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))

    configure_logging("debug")

    assert calls == {"level": "DEBUG", "format": LOG_FORMAT}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

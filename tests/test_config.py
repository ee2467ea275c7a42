"""Unit tests for core/config.py -- Settings defaults and validation."""

import pytest
from pydantic import ValidationError

from core.config import Settings, get_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in ("DATABASE_URL", "PORT", "HOST", "DEBUG", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.port == 3000
    assert settings.host == "127.0.0.1"
    assert settings.database_url.startswith("sqlite:///")
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///:memory:")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("LOG_LEVEL", "warning")
    settings = Settings(_env_file=None)
    assert settings.database_url == "sqlite:///:memory:"
    assert settings.port == 8080
    assert settings.log_level == "WARNING"


def test_debug_forces_debug_log_level(monkeypatch):
    monkeypatch.setenv("DEBUG", "true")
    assert Settings(_env_file=None).log_level == "DEBUG"


@pytest.mark.parametrize(
    "var,value",
    [
        ("DATABASE_URL", "   "),
        ("PORT", "0"),
        ("PORT", "70000"),
        ("LOG_LEVEL", "chatty"),
    ],
)
def test_invalid_settings_are_rejected(monkeypatch, var, value):
    monkeypatch.setenv(var, value)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings_is_cached():
    assert get_settings() is get_settings()

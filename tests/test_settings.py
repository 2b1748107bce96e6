"""
Tests for environment-driven settings.
"""

import pytest
from pydantic import ValidationError

from worldcup.settings import WorldCupSettings, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate settings from the developer's environment and .env file."""
    monkeypatch.chdir(tmp_path)
    for var in ("ROUNDS", "DICE_COUNT", "DIE_FACES", "SEED", "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.delenv(f"WORLDCUP_{var}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults():
    settings = WorldCupSettings()

    assert settings.rounds == 100
    assert settings.dice_count == 2
    assert settings.die_faces == 6
    assert settings.seed is None
    assert settings.log_level == "WARNING"
    assert settings.log_file is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("WORLDCUP_ROUNDS", "7")
    monkeypatch.setenv("WORLDCUP_SEED", "42")
    monkeypatch.setenv("WORLDCUP_LOG_LEVEL", "debug")

    settings = WorldCupSettings()

    assert settings.rounds == 7
    assert settings.seed == 42
    assert settings.log_level == "DEBUG"


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("WORLDCUP_LOG_LEVEL", "chatty")

    with pytest.raises(ValidationError):
        WorldCupSettings()


def test_negative_rounds_rejected(monkeypatch):
    monkeypatch.setenv("WORLDCUP_ROUNDS", "-1")

    with pytest.raises(ValidationError):
        WorldCupSettings()


def test_get_settings_is_cached():
    assert get_settings() is get_settings()

"""
Configuration tests.
"""

from pathlib import Path

import pytest

from tracker.config import Settings, get_settings


def test_get_settings_returns_settings() -> None:
    """get_settings returns a Settings instance."""
    settings = get_settings()
    assert isinstance(settings, Settings)


def test_settings_has_required_attributes() -> None:
    """Settings has all required attributes."""
    settings = get_settings()
    assert hasattr(settings, "app_name")
    assert hasattr(settings, "database_url")
    assert hasattr(settings, "internal_job_token")
    assert hasattr(settings, "data_dir")
    assert settings.app_name == "Pillar Tracker"


def test_scoring_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Scoring settings default to the equal preset, 12-month half-life, window 3."""
    monkeypatch.delenv("WEIGHT_PRESET", raising=False)
    monkeypatch.delenv("DECAY_HALF_LIFE_MONTHS", raising=False)
    monkeypatch.delenv("TREND_WINDOW", raising=False)
    monkeypatch.delenv("DATA_DIR", raising=False)
    get_settings.cache_clear()
    try:
        settings = get_settings()
        assert settings.weight_preset == "equal"
        assert settings.decay_half_life_months == 12.0
        assert settings.trend_window == 3
        assert settings.data_dir == Path("data")
    finally:
        get_settings.cache_clear()


def test_scoring_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """WEIGHT_PRESET, DECAY_HALF_LIFE_MONTHS, TREND_WINDOW, DATA_DIR load from env."""
    monkeypatch.setenv("WEIGHT_PRESET", "mediaHeavy")
    monkeypatch.setenv("DECAY_HALF_LIFE_MONTHS", "6")
    monkeypatch.setenv("TREND_WINDOW", "5")
    monkeypatch.setenv("DATA_DIR", "/tmp/tracker-data")
    get_settings.cache_clear()
    try:
        settings = get_settings()
        assert settings.weight_preset == "mediaHeavy"
        assert settings.decay_half_life_months == 6.0
        assert settings.trend_window == 5
        assert settings.data_dir == Path("/tmp/tracker-data")
    finally:
        get_settings.cache_clear()


def test_postgresql_url_upgraded_to_psycopg(monkeypatch: pytest.MonkeyPatch) -> None:
    """A generic postgresql:// URL is rewritten to use the psycopg3 driver."""
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@localhost:5432/tracker")
    get_settings.cache_clear()
    try:
        assert get_settings().database_url == "postgresql+psycopg://u:p@localhost:5432/tracker"
    finally:
        get_settings.cache_clear()


def test_debug_flag_parsing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEBUG", "TRUE")
    get_settings.cache_clear()
    try:
        assert get_settings().debug is True
    finally:
        get_settings.cache_clear()

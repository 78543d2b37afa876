"""Tests for application settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from birdhub.config import Settings, get_settings


class TestSettings:
    """Test defaults and environment overrides."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("BIRDHUB_DATA_PATH", raising=False)
        monkeypatch.delenv("BIRDHUB_LIFELIST_URL", raising=False)
        settings = Settings(_env_file=None)
        assert settings.app_name == "birdhub"
        assert settings.data_path == Path("data.json")
        assert settings.lifelist_url is None
        assert settings.detect_columns is False

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BIRDHUB_DATA_PATH", "site/data.json")
        monkeypatch.setenv("BIRDHUB_DETECT_COLUMNS", "true")
        monkeypatch.setenv("BIRDHUB_LIFELIST_URL", "https://example.com/l.csv")
        settings = Settings(_env_file=None)
        assert settings.data_path == Path("site/data.json")
        assert settings.detect_columns is True
        assert settings.lifelist_url == "https://example.com/l.csv"

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()

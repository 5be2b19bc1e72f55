from __future__ import annotations

from pathlib import Path

from patrol.core import config as core_config


def test_settings_read_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("STORAGE_DIR", str(tmp_path / "store"))
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")
    core_config.get_settings.cache_clear()
    try:
        settings = core_config.get_settings()
        assert settings.port == 8080
        assert settings.storage_dir == tmp_path / "store"
        assert settings.cors_origins == ("http://a.test", "http://b.test")
    finally:
        core_config.get_settings.cache_clear()


def test_settings_defaults(monkeypatch):
    for name in ("PORT", "STORAGE_DIR", "STATIC_DIR", "CORS_ORIGINS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("PORT", "not-a-number")
    core_config.get_settings.cache_clear()
    try:
        settings = core_config.get_settings()
        assert settings.port == 3000
        assert settings.storage_dir == Path("data")
        assert settings.cors_origins == ("*",)
        assert settings.log_level == "INFO"
    finally:
        core_config.get_settings.cache_clear()

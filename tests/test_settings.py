# tests/test_settings.py
from tokenplot.settings import Settings


def test_defaults(monkeypatch):
    for name in ("HOST", "PORT", "HISTORY_SIZE", "FLASK_DEBUG", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings()
    assert settings.host == "127.0.0.1"
    assert settings.port == 3001
    assert settings.history_size == 5
    assert settings.debug is False
    assert settings.log_level == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("HISTORY_SIZE", "3")
    monkeypatch.setenv("FLASK_DEBUG", "true")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = Settings()
    assert settings.port == 8080
    assert settings.history_size == 3
    assert settings.debug is True
    assert settings.log_level == "DEBUG"

# tests/test_settings.py
import importlib

from app import settings


def test_defaults(monkeypatch):
    for key in ("HOST", "PORT", "LOG_LEVEL", "CATALOG_BASE_URL"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr("dotenv.load_dotenv", lambda *a, **k: False)
    s = importlib.reload(settings)
    assert s.PORT == 8080
    assert s.HOST == "0.0.0.0"
    assert s.LOG_LEVEL == "INFO"
    assert s.CATALOG_BASE_URL == "http://127.0.0.1:8080"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    s = importlib.reload(settings)
    assert s.PORT == 9090
    assert s.LOG_LEVEL == "DEBUG"
    assert s.CATALOG_BASE_URL == "http://127.0.0.1:9090"
    monkeypatch.undo()
    importlib.reload(settings)

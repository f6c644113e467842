import pytest
from bbuddy.config import API_BASE_URL, DEFAULT_TIMEOUT_S, load_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("BBUDDY_API_URL", raising=False)
    monkeypatch.delenv("BBUDDY_TIMEOUT_S", raising=False)
    settings = load_settings()
    assert settings.base_url == API_BASE_URL
    assert settings.timeout_s == DEFAULT_TIMEOUT_S


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("BBUDDY_API_URL", "https://api.example.com/")
    monkeypatch.setenv("BBUDDY_TIMEOUT_S", "2.5")
    settings = load_settings()
    assert settings.base_url == "https://api.example.com"
    assert settings.timeout_s == 2.5


def test_bad_timeout(monkeypatch):
    monkeypatch.setenv("BBUDDY_TIMEOUT_S", "soon")
    with pytest.raises(RuntimeError):
        load_settings()

from __future__ import annotations

from config.settings import get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("RAPID_API_KEY", raising=False)
    monkeypatch.delenv("RAPID_API_HOST", raising=False)
    monkeypatch.delenv("HTTP_TIMEOUT_SECONDS", raising=False)
    settings = get_settings()
    assert settings.rapid_api_host == "real-time-people-company-data.p.rapidapi.com"
    assert settings.http_timeout_seconds == 20


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("RAPID_API_KEY", "k")
    monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "3")
    settings = get_settings()
    assert settings.rapid_api_key == "k"
    assert settings.http_timeout_seconds == 3


def test_blank_key_counts_as_missing(monkeypatch):
    monkeypatch.setenv("RAPID_API_KEY", "")
    assert get_settings().rapid_api_key is None

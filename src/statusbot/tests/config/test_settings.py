"""
Tests for environment-driven settings.
"""

from statusbot.config import Settings


def test_defaults(settings):
    assert settings.SEARCH_INDEX_NAME == "azuresql-index"
    assert settings.STATUS_INTENT_NAME == "count"
    assert settings.recognizer_configured is False
    assert settings.search_configured is False


def test_numeric_settings_are_read(monkeypatch):
    monkeypatch.setenv("PORT", "9001")
    monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "5.5")

    settings = Settings()

    assert settings.API_PORT == 9001
    assert settings.HTTP_TIMEOUT_SECONDS == 5.5


def test_malformed_numbers_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("PORT", "eighty")
    monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "soon")

    settings = Settings()

    assert settings.API_PORT == 8000
    assert settings.HTTP_TIMEOUT_SECONDS == 30.0


def test_recognizer_needs_every_setting(settings):
    settings.CLU_ENDPOINT = "https://clu.example.com"
    settings.CLU_API_KEY = "key"
    settings.CLU_PROJECT_NAME = "ProjectStatus"
    assert settings.recognizer_configured is False

    settings.CLU_DEPLOYMENT_NAME = "production"
    assert settings.recognizer_configured is True


def test_summary_masks_secrets(settings):
    settings.CLU_API_KEY = "super-secret"
    settings.SEARCH_API_KEY = "also-secret"

    summary = settings.summary()

    assert "super-secret" not in summary
    assert "also-secret" not in summary

from recipe_ingest.app.core.config import get_settings


def test_defaults():
    settings = get_settings()
    assert settings.scraper_timeout_seconds == 10.0
    assert settings.tiktok_default_duration_seconds == 30
    assert settings.youtube_caption_language == "en"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SCRAPER_TIMEOUT_SECONDS", "3.5")
    monkeypatch.setenv("TIKTOK_DEFAULT_DURATION_SECONDS", "45")
    settings = get_settings()
    assert settings.scraper_timeout_seconds == 3.5
    assert settings.tiktok_default_duration_seconds == 45


def test_settings_are_cached():
    assert get_settings() is get_settings()

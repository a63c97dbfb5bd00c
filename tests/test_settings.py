import pytest
from pydantic import ValidationError as PydanticValidationError

from plantkeeper.shared.config import Settings, get_settings


class TestSettings:

    def test_defaults(self):
        settings = Settings()
        assert settings.APP_NAME == "Plant Keeper"
        assert settings.ENVIRONMENT == "development"
        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_FORMAT == "text"
        assert settings.LOG_FILE is None
        assert settings.DEFAULT_LOCALE == "en"
        assert settings.supported_locales_list == ["en", "uk"]
        assert settings.is_development
        assert not settings.is_production
        assert not settings.is_testing

    def test_values_from_environment(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "Test")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_FORMAT", "JSON")
        monkeypatch.setenv("DEFAULT_LOCALE", "uk")

        settings = Settings()
        assert settings.ENVIRONMENT == "test"
        assert settings.is_testing
        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.LOG_FORMAT == "json"
        assert settings.DEFAULT_LOCALE == "uk"

    @pytest.mark.parametrize(
        "name, value",
        [
            ("ENVIRONMENT", "qa"),
            ("LOG_LEVEL", "LOUD"),
            ("LOG_FORMAT", "xml"),
            ("DEFAULT_LOCALE", "de"),
        ],
    )
    def test_invalid_values(self, monkeypatch, name, value):
        monkeypatch.setenv(name, value)
        with pytest.raises(PydanticValidationError):
            Settings()

    def test_supported_locales_parsing(self, monkeypatch):
        monkeypatch.setenv("SUPPORTED_LOCALES", " en , uk ,, ")
        assert Settings().supported_locales_list == ["en", "uk"]

    def test_get_settings_is_cached(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("DEFAULT_LOCALE", "uk")
        assert get_settings() is first
        assert get_settings().DEFAULT_LOCALE == "en"

        get_settings.cache_clear()
        assert get_settings().DEFAULT_LOCALE == "uk"

"""
Unit tests for application settings.
"""

import pytest
from pydantic import ValidationError

from card_deck.infra.config.settings import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("DEFAULT_LOCALE", raising=False)

        settings = Settings(_env_file=None)

        assert settings.default_locale == "en"
        assert settings.deck_update_max_attempts == 3

    @pytest.mark.parametrize("locale", ["en", "fr"])
    def test_supported_default_locale(self, locale):
        assert Settings(default_locale=locale).default_locale == locale

    def test_unsupported_default_locale_is_a_config_error(self):
        with pytest.raises(ValidationError, match="default_locale|DEFAULT_LOCALE"):
            Settings(default_locale="de")

    def test_unsupported_locale_from_environment(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_LOCALE", "de")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_max_attempts_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(deck_update_max_attempts=0)

    def test_asset_url_drops_trailing_slash(self):
        settings = Settings(asset_url="https://cdn.example.test/")

        assert settings.get_asset_url() == "https://cdn.example.test"

    def test_cors_origins_are_split(self):
        settings = Settings(cors_origins="https://a.test, https://b.test")

        assert settings.get_cors_origins() == ["https://a.test", "https://b.test"]

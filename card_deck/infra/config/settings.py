"""
Application configuration settings.
"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=[".env", "../.env"],
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Application
    app_name: str = Field("Card Deck API", alias="APP_NAME")

    # Environment
    environment: str = Field("development", alias="ENVIRONMENT")
    debug: bool = Field(False, alias="DEBUG")

    # Server
    host: str = Field("127.0.0.1", alias="HOST")
    port: int = Field(8080, alias="PORT")

    # Database
    database_url: str = Field("sqlite+aiosqlite:///./cards.db", alias="DATABASE_URL")
    debug_sql: bool = Field(False, alias="DATABASE_ECHO")

    # Decks
    deck_update_max_attempts: int = Field(3, ge=1, alias="DECK_UPDATE_MAX_ATTEMPTS")

    # Assets and localization
    asset_url: str = Field("http://localhost:8080/static", alias="ASSET_URL")
    default_locale: Literal["en", "fr"] = Field("en", alias="DEFAULT_LOCALE")

    # CORS
    cors_origins: str = Field("*", alias="CORS_ORIGINS")
    cors_allow_credentials: bool = Field(True, alias="CORS_ALLOW_CREDENTIALS")

    # Logging
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_format: str = Field("json", alias="LOG_FORMAT")

    def get_cors_origins(self) -> list[str]:
        """Parse CORS origins from string."""
        if self.cors_origins == "*":
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",")]

    def get_asset_url(self) -> str:
        """Asset base URL without a trailing slash."""
        return self.asset_url.rstrip("/")


_settings = None


def get_settings() -> Settings:
    """Get settings instance (useful for dependency injection)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration loaded from environment variables and `.env`.
    """

    # Remote API
    API_BASE_URL: str = Field("https://api.pethealthuk.co.uk/api", description="Base URL of the PetHealth REST API")
    API_TIMEOUT: float = Field(30.0, description="HTTP timeout in seconds applied to every request")
    API_USER_AGENT: str = Field("PetHealth-Client/1.0", description="User-Agent header sent with every request")

    # Local storage
    STORAGE_PATH: str = Field("pethealth_storage.json", description="JSON file backing the local key-value store")
    SESSION_STORAGE_KEY: str = Field("pethealth_data", description="Key under which the session aggregate is saved")
    AUTH_TOKEN_STORAGE_KEY: str = Field("auth_token", description="Key under which the bearer token is saved")

    # Logging
    LOG_LEVEL: str = Field("INFO", description="Root log level")
    LOG_FORMAT: Literal["colored", "json", "plain"] = Field("colored", description="Console log format")
    LOG_FILE: str | None = Field(None, description="Optional file for JSON logs")

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("API_BASE_URL", mode="after")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("LOG_LEVEL", mode="after")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper()


# Process-wide settings cache
_settings_instance = None


def get_settings() -> Settings:
    """
    Return the cached settings instance.

    Avoids re-reading environment variables on every call.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance

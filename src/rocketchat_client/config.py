"""Client configuration via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Server
    rocketchat_url: str = "http://localhost:3000/"
    request_timeout: float = 30.0

    # Credentials (used by SettingsTokenRepository)
    rocketchat_user_id: str = ""
    rocketchat_auth_token: str = ""

    # App
    environment: str = "development"
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return cached client settings. Lazy initialization to avoid import-time errors."""
    return Settings()

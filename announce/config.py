"""Application settings using Pydantic."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    app_name: str = Field(default="Announce")
    env: str = Field(default="dev")
    debug: bool = Field(default=True)
    secret_key: str = Field(default="change-me")
    session_max_age: int = Field(default=24 * 60 * 60)
    message_categories: list[str] = Field(
        default_factory=lambda: ["message", "success", "warning", "error"]
    )
    message_session_key: str = Field(default="user_message_store")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="ANNOUNCE_",
        extra="ignore",
        case_sensitive=False,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

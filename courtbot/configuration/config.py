"""Configuration management for courtbot."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    # Telegram Settings
    telegram_bot_token: str = Field(default="", alias="TELEGRAM_BOT_TOKEN")
    admin_user_id: int | None = Field(default=None, alias="ADMIN_USER_ID")

    # Wizard Settings
    # Idle time before a pending wizard prompt is cancelled; 0 disables the timeout
    wizard_timeout_seconds: float = Field(default=300.0, ge=0, alias="WIZARD_TIMEOUT_SECONDS")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        alias="LOG_FORMAT",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: str | None) -> str:
        """Normalize log level value from environment."""
        if value is None:
            return "INFO"
        normalized = str(value).strip().upper()
        if normalized in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            return normalized
        raise ValueError("LOG_LEVEL must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

"""Bootstrap configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Bootstrap configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding=ENV_FILE_ENCODING,
        extra="ignore",
        populate_by_name=True,
    )

    mongodb_uri: str = Field(
        description="Connection string carrying the administrative credentials",
        min_length=1,
    )
    mongodb_database: str = Field(
        default="budget_tracker",
        description="Name of the database initialised by the bootstrap",
        min_length=1,
    )
    mongodb_app_username: str = Field(
        default="budget_user",
        description="Username of the application account created on the target database",
        min_length=1,
    )
    mongodb_app_password: str | None = Field(
        default=None,
        description="Password for the application account; prompted for when missing",
    )
    mongodb_timeout_ms: int = Field(
        default=10_000,
        description="Server selection and connect timeout in milliseconds",
        gt=0,
    )
    update_existing_user: bool = Field(
        default=False,
        alias="MONGODB_UPDATE_EXISTING_USER",
        description="Reset password and roles when the application user already exists",
    )
    log_level: str = Field(default="INFO", description="Root logging level")

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return cached bootstrap settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]

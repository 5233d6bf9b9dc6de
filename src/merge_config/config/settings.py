"""Application settings using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MERGE_CONFIG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Location of the merge configuration, relative to the working directory
    config_path: str = ".github/merge-config.py"

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"  # "console" | "json"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

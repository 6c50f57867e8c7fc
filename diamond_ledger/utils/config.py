"""Configuration management for the diamond ledger."""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StateConfig(BaseSettings):
    """State store configuration."""

    backend: Literal["memory", "file"] = Field(
        default="file", description="State store backend"
    )
    directory: Path = Field(
        default=Path("./state"), description="Directory for the file backend"
    )

    model_config = SettingsConfigDict(
        env_prefix="STATE_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


class AppConfig(BaseSettings):
    """Main application configuration."""

    log_level: str = Field(default="INFO", description="Logging level")
    development: bool = Field(default=False, description="Development mode")
    debug: bool = Field(default=False, description="Debug mode")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the log level and reject unknown names."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )


class Settings:
    """Global settings manager."""

    def __init__(self) -> None:
        """Initialize settings."""
        # Load from default .env or environment variables
        self.app = AppConfig()
        self.state = StateConfig()


settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global settings
    if settings is None:
        settings = Settings()
    return settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global settings
    settings = None

"""Environment settings powered by Pydantic BaseSettings."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Environment configuration for the CLI."""

    model_config = SettingsConfigDict(
        env_prefix="MATCHSORTER_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Ensure the log level is a standard logging level name."""
        normalized = value.strip().upper()
        if normalized not in logging.getLevelNamesMapping():
            msg = f"Unknown log level '{value}'"
            raise ValueError(msg)
        return normalized

    @property
    def log_level_value(self) -> int:
        """Numeric logging level."""
        return logging.getLevelNamesMapping()[self.log_level]


def get_settings() -> AppSettings:
    """Get a settings instance."""
    return AppSettings()

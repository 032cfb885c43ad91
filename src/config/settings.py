"""Environment configuration and validation.

This module defines strongly-typed settings for the command-line entry point, loaded from
environment variables (optionally via a local `.env` file). None of the settings affect parse
results: the lexicon and the number/unit tables are source constants.
"""

from __future__ import annotations

import logging

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    output_indent: int | None = Field(default=None, ge=0, alias="OUTPUT_INDENT")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that the level is one of the standard `logging` level names."""

        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown LOG_LEVEL: {value}")
        return level


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Raises:
        RuntimeError: If the environment configuration is invalid.
    """

    try:
        return Settings()
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc

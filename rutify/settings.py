"""
Configuration management using Pydantic Settings.

Loads CLI configuration from environment variables (prefix ``RUTIFY_``)
and .env files with validation and type conversion. The formatting
functions themselves never read the environment.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .options import RutFormat


class Settings(BaseSettings):
    """
    CLI settings loaded from environment variables and .env files.

    Settings are loaded in this order of precedence:
    1. Environment variables
    2. .env file in current directory
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="RUTIFY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Logging Configuration
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_format: str = Field(
        default="text",
        description="Log output format (json, text)"
    )

    service_name: str = Field(
        default="rutify",
        description="Service name attached to every log entry"
    )

    # Default formatting options for the CLI
    default_format: RutFormat = Field(
        default=RutFormat.STANDARD,
        description="Output format when --format is not given"
    )

    default_separator: str = Field(
        default=".",
        min_length=1,
        max_length=1,
        description="Thousands separator when --separator is not given"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level is one of the standard levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of: {', '.join(sorted(valid_levels))}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v):
        """Validate log format is supported."""
        valid_formats = {"json", "text"}
        if v.lower() not in valid_formats:
            raise ValueError(f"log_format must be one of: {', '.join(sorted(valid_formats))}")
        return v.lower()


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()

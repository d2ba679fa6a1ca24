"""Configuration management using Pydantic Settings.

This module provides type-safe configuration management with automatic
environment variable loading and validation.

The configuration is organized into logical groups:
- DatabaseConfig: Database connection settings
- LoggingConfig: Logging levels, files, and debugging options
"""

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseConfig(BaseModel):
    """Database connection configuration."""

    url: str = "sqlite+aiosqlite:///data/db/trackvault.db"
    echo: bool = False


class LoggingConfig(BaseModel):
    """Logging configuration for console and file output."""

    console_level: str = "INFO"
    file_level: str = "DEBUG"
    log_file: Path = Path("data/logs/trackvault.log")
    real_time_debug: bool = True


class Settings(BaseSettings):
    """Main application settings with environment variable support.

    Environment variables can be set using flat naming or nested naming:
    - Flat: DATABASE_URL, CONSOLE_LOG_LEVEL, LOG_FILE
    - Nested: DATABASE__URL, LOGGING__CONSOLE_LEVEL

    The .env file is automatically loaded for development convenience.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    database: DatabaseConfig = DatabaseConfig()
    logging: LoggingConfig = LoggingConfig()

    @model_validator(mode="before")
    @classmethod
    def transform_flat_env_vars(cls, data: Any) -> Any:
        """Map flat names (DATABASE_URL, CONSOLE_LOG_LEVEL) onto the nested groups.

        Flat names are read from keyword arguments first, then from the
        process environment. A flat name wins over its nested counterpart.
        """
        if not isinstance(data, dict):
            return data

        sections = {
            "database": {
                "database_url": "url",
                "database_echo": "echo",
            },
            "logging": {
                "console_log_level": "console_level",
                "file_log_level": "file_level",
                "log_file": "log_file",
                "log_real_time_debug": "real_time_debug",
            },
        }

        for section, mapping in sections.items():
            values: dict[str, Any] = {}
            for flat_key, field_key in mapping.items():
                if flat_key in data:
                    values[field_key] = data.pop(flat_key)
                elif flat_key.upper() in os.environ:
                    values[field_key] = os.environ[flat_key.upper()]
            if not values:
                continue
            existing = data.get(section)
            if isinstance(existing, BaseModel):
                existing = existing.model_dump()
            data[section] = {**existing, **values} if isinstance(existing, dict) else values

        return data


# Singleton instance for application use
settings = Settings()

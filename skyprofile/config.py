"""Configuration management using Pydantic Settings."""

import logging
from enum import Enum

from pydantic import field_validator
from pydantic_settings import BaseSettings

from skyprofile.exceptions import ConfigError


class LogFormat(str, Enum):
    """Log output format."""
    JSON = "json"
    CONSOLE = "console"


class ProfileConfig(BaseSettings):
    """Configuration for skyprofile."""

    # Logging
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.CONSOLE

    model_config = {
        "env_prefix": "SKYPROFILE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ConfigError(f"Unknown log level: {value}")
        return level

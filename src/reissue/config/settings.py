"""Settings for the reissue client, populated from REISSUE_* env vars."""

import typing as t
from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Runtime environment for the application."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Log levels understood by loguru."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Client and logging settings.

    Values are read from environment variables prefixed with ``REISSUE_``
    (e.g. ``REISSUE_MAX_RETRIES=5``) and can be overridden in code.
    """

    model_config = SettingsConfigDict(env_prefix="REISSUE_", frozen=True)

    environment: Environment = Environment.DEVELOPMENT
    log_level: LogLevel = LogLevel.INFO
    max_retries: int = Field(default=3, ge=0, description="Re-issues per request")
    timeout: float | None = Field(
        default=None, gt=0, description="Total per-attempt timeout in seconds"
    )
    base_url: str | None = Field(
        default=None, description="Prefix for relative request URLs"
    )


def build_settings(**overrides: t.Any) -> Settings:
    """Build Settings, ignoring overrides that are None.

    Lets callers forward optional arguments straight through without
    clobbering environment-provided values.
    """
    return Settings(**{key: value for key, value in overrides.items() if value is not None})

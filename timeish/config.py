"""timeish/config.py — Package settings and logging setup.

Settings are read from TIMEISH_* environment variables or a .env file.

The package itself never configures logging; it only emits records on the
"timeish.*" loggers.  configure_logging() is the hook for a host application
that wants those records formatted and filtered by TIMEISH_LOG_LEVEL without
its own logging setup.  Call it once at startup.
"""
import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TIMEISH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Formatting
    DEFAULT_SEPARATOR: str = ":"

    # Logging
    LOG_LEVEL: str = "INFO"

    @field_validator("DEFAULT_SEPARATOR")
    @classmethod
    def validate_separator(cls, v: str) -> str:
        """Reject separators that could not be split back out of rendered text."""
        if not v:
            raise ValueError("DEFAULT_SEPARATOR must not be empty")
        if any(ch.isdigit() for ch in v):
            raise ValueError(f"DEFAULT_SEPARATOR must not contain digits, got '{v}'")
        return v


settings = Settings()


def configure_logging() -> None:
    """Configure root logger level and format from settings.

    Intended for host applications; library code does not call it.
    """
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

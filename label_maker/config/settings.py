"""Library settings and configuration management."""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DUPLICATE_POLICIES = ("replace", "error")
LOG_FORMATS = ("json", "console")
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class Settings(BaseSettings):
    """Label maker settings with environment variable support."""

    # Matching
    case_sensitive: bool = Field(default=True)
    duplicate_policy: str = Field(default="replace")

    # Default classifier
    patterns_file: Optional[str] = Field(default=None)

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")

    model_config = SettingsConfigDict(
        env_prefix="LABEL_MAKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("duplicate_policy")
    @classmethod
    def validate_duplicate_policy(cls, v: str) -> str:
        """Validate the duplicate pattern policy."""
        v = v.lower()
        if v not in DUPLICATE_POLICIES:
            raise ValueError("Duplicate policy must be 'replace' or 'error'")
        return v

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate the log renderer name."""
        v = v.lower()
        if v not in LOG_FORMATS:
            raise ValueError("Log format must be 'json' or 'console'")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of {', '.join(LOG_LEVELS)}")
        return v


@lru_cache()
def get_settings() -> Settings:
    """Get cached label maker settings."""
    return Settings()

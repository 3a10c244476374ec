"""
grantmatch runtime settings.

Read once from ``GRANTMATCH_*`` environment variables and cached.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["debug", "info", "warning", "error", "critical"]


class GrantMatchSettings(BaseSettings):
    """Process-wide matcher settings."""

    model_config = SettingsConfigDict(
        env_prefix="GRANTMATCH_",
        case_sensitive=False,
        extra="ignore",
    )

    # When off, "many"-headed sequences get no combinator meaning and are
    # compared like any other sequence.
    enable_many: bool = Field(default=True)
    trace_decisions: bool = Field(default=False)
    log_level: LogLevel = Field(default="warning")

    @field_validator("log_level", mode="before")
    @classmethod
    def _lower_log_level(cls, value: Any) -> Any:
        return value.lower() if isinstance(value, str) else value


@lru_cache(maxsize=1)
def get_settings() -> GrantMatchSettings:
    """Return the cached settings instance.

    Raises:
        pydantic.ValidationError: When a ``GRANTMATCH_*`` variable is invalid.
    """
    return GrantMatchSettings()


def reset_settings() -> None:
    """Drop the cached settings so the next read sees the current environment."""
    get_settings.cache_clear()

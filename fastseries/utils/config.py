"""
Configuration for the fast series path (pydantic-settings)

Values are read from environment variables prefixed with ``FASTSERIES_``
(e.g. ``FASTSERIES_PRODUCT_GUARD_DEGREES=4``) or from a local ``.env`` file.
"""

from functools import lru_cache
import logging

from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Fast series settings with validation"""

    # Expansion
    default_order: int = Field(default=6, ge=1)
    max_order: int = Field(default=500, ge=1, le=100000)

    # Extra degrees composed for each factor of a product before the
    # accumulated result is cut back to the requested order
    product_guard_degrees: int = Field(default=2, ge=0, le=64)

    # Fall back to sympy.series when the fast path is infeasible
    fallback_enabled: bool = Field(default=True)

    # Logging
    log_level: str = Field(default="WARNING")

    model_config = SettingsConfigDict(
        env_prefix="FASTSERIES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("max_order")
    @classmethod
    def validate_max_order(cls, v, info: ValidationInfo):
        default_order = info.data.get("default_order")
        if default_order is not None and v < default_order:
            raise ValueError(
                f"max_order ({v}) must not be below default_order ({default_order})"
            )
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        level = str(v).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @property
    def log_level_number(self) -> int:
        return getattr(logging, self.log_level)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, read once from the environment."""
    return Settings()


__all__ = ['Settings', 'get_settings']

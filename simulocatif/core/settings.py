"""Application settings with environment variable support.

Uses pydantic-settings for typed configuration validation.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    """Application configuration loaded from environment variables."""

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    json_logs: bool = Field(default=False, description="Render logs as JSON")

    # Feature flags
    debug_mode: bool = Field(default=False, description="Show raw parameters and results")
    show_welcome_toast: bool = Field(default=True, description="Greet the user on first load")

    # Charts
    cash_flow_chart_years: int = Field(default=10, ge=1, le=30)
    amortization_chart_max_years: int = Field(default=20, ge=1, le=30)

    model_config = {
        "env_prefix": "SIMULOCATIF_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> AppSettings:
    """Get cached application settings."""
    return AppSettings()

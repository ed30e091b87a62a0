"""Environment settings - loads runtime overrides from env vars and .env file.

Priority:
1. Environment variables (PROCROUTE_*)
2. .env file in the working directory
3. Default values in this file
"""

from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ROUTE_TABLE = Path("/proc/net/route")


class EnvSettings(BaseSettings):
    """Runtime configuration for procroute."""

    model_config = SettingsConfigDict(
        env_prefix="PROCROUTE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ============================================
    # Input
    # ============================================
    route_table_path: Path = DEFAULT_ROUTE_TABLE

    # ============================================
    # Logging
    # ============================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> Any:
        """Accept level names in any case (debug, Debug, DEBUG)."""
        if isinstance(v, str):
            return v.strip().upper()
        return v


@lru_cache
def get_settings() -> EnvSettings:
    """Return the process-wide settings, loading them on first use."""
    return EnvSettings()

"""Application settings loaded from environment variables.

Configuration sources (in priority order):
1. OS environment variables with the ``SEPA_`` prefix
2. The .env file named by the SEPA_ENV_FILE environment variable
3. Default values

Uses pydantic-settings for automatic type coercion and validation.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def default_schema_dir() -> Path:
    """Directory holding the pain.001 XSD files shipped with the package."""
    return Path(__file__).resolve().parent.parent / "sepa_ct" / "schemas"


def _resolve_env_file_path() -> Path | None:
    env_file_path = os.environ.get("SEPA_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if path.exists():
            return path
    return None


class Settings(BaseSettings):
    """Runtime configuration for the CLI and the XML adapters.

    The message content itself (originator, IBAN, batch mode, ...) is not a
    setting; it is passed per message as MessageConfig.
    """

    model_config = SettingsConfigDict(
        env_prefix="SEPA_",
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Schema validation
    schema_dir: Path = default_schema_dir()

    # Output
    default_version: Literal["2", "3"] = "3"
    pretty_print: bool = True

    # Logging
    log_level: str = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, v: Any) -> str:
        return str(v).upper() if v else "INFO"


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()

"""
hammock.tier0_core.config
──────────────────────────
Typed configuration with env layering. Reads from .env → environment
variables. All fields are typed via Pydantic and prefixed with HAMMOCK_.

Minimal stack: pydantic-settings + python-dotenv
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class HammockConfig(BaseSettings):
    """
    Settings for the default CSRF fetcher and for logging.
    Endpoint descriptions are code, not configuration, and live elsewhere.
    """

    model_config = SettingsConfigDict(
        env_prefix="HAMMOCK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── HTTP ──────────────────────────────────────────────────────────────────
    base_url: str = Field(default="")
    timeout: float = Field(default=30.0, gt=0)

    # ── CSRF ──────────────────────────────────────────────────────────────────
    csrf_cookie_name: str = Field(default="csrftoken")
    csrf_header_name: str = Field(default="X-CSRFToken")

    # ── Logging ───────────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        allowed = {"json", "console"}
        if v.lower() not in allowed:
            raise ValueError(f"log_format must be one of {allowed}, got {v!r}")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()


@lru_cache(maxsize=1)
def get_config() -> HammockConfig:
    """
    Return the singleton config. Cached after first call.
    Call _reset_config() in tests to pick up new env vars.
    """
    return HammockConfig()


def _reset_config() -> None:
    """For tests — clear the config cache."""
    get_config.cache_clear()


__all__ = ["HammockConfig", "get_config"]

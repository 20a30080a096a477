"""Probe configuration management using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Node endpoints are fixed; they are deliberately not settings fields.
NODE_RPC_URL = "http://localhost:9933"
NODE_METRICS_URL = "http://localhost:9615/metrics"


class Settings(BaseSettings):
    """Probe settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="NODE_PROBE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level")
    log_format: Literal["json", "console"] = Field(
        default="console", description="Log output format"
    )

    # HTTP
    http_timeout: float | None = Field(
        default=None,
        description="Metrics request timeout in seconds (unset waits indefinitely)",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

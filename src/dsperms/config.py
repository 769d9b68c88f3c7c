"""Application configuration from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="DSPERMS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Grafana HTTP API
    grafana_url: str = Field(
        default="http://localhost:3000",
        description="Grafana server URL",
    )
    grafana_auth: str = Field(
        default="",
        description="API token, or user:password for basic auth",
    )
    grafana_org_id: int | None = Field(default=None, description="Organization ID header")
    request_timeout: float = Field(default=30.0, description="HTTP timeout in seconds")

    # Reconciliation
    prune_undeclared: bool = Field(
        default=True,
        description="Remove server permissions that are not declared",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: Literal["text", "json"] = Field(default="text", description="Log output format")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

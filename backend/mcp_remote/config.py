"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - archive_base_url may be unset; only save_conversation fails without it
    - Blank archive_base_url counts as unset, trailing slash stripped

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: server starts with no environment at all
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Archive service (save_conversation)
    archive_base_url: str | None = None
    archive_timeout_seconds: float = 30.0

    @field_validator("archive_base_url", mode="before")
    @classmethod
    def normalize_archive_url(cls, v: str | None) -> str | None:
        if isinstance(v, str):
            v = v.strip().rstrip("/")
            return v or None
        return v

    # MCP server metadata (initialize)
    protocol_version: str = "2025-06-18"
    server_name: str = "Remote MCP Server"
    server_version: str = "0.1.0"

    # HTTP
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()

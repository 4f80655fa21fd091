from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    app_title: str = "Jewelry CRM Client"
    app_version: str = "0.1.0"

    # Backend REST API. NEXT_PUBLIC_API_URL is shared with the web dashboards.
    api_base_url: str = Field(
        "http://localhost:8000/api",
        validation_alias=AliasChoices("NEXT_PUBLIC_API_URL", "JEWELCRM_API_URL", "api_base_url"),
    )
    request_timeout: float = 30.0

    # Persisted login session (same shape as the browser "auth-storage" blob)
    session_file: str = "data/auth-storage.json"

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_http: str = "WARNING"          # httpx / httpcore — outbound HTTP
    log_level_api: str = "INFO"              # CRM API facade
    log_level_views: str = "INFO"            # list-view controllers and flows

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()

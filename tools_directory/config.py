"""Configuration for the tools directory service.

Values are read from environment variables (or a local .env file). The admin
secret is carried on the settings object and injected into the
authorization check; nothing else reads it from the process environment.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.enums import StorageBackend


class Settings(BaseSettings):
    """Service settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    log_level: str = "INFO"
    environment: str = "development"
    cors_allowed_origins: str = "*"
    sentry_dsn: str | None = None

    # Admin access
    admin_password: str | None = Field(default=None, description="Shared admin secret")

    # Storage
    storage_backend: StorageBackend = StorageBackend.FILE
    tools_file: Path = Path("data/tools.json")
    kv_rest_api_url: str | None = None
    kv_rest_api_token: str | None = None
    tools_key: str = "tools"
    kv_timeout_seconds: float = 10.0

    @property
    def cors_origins_list(self) -> list[str]:
        """CORS origins as a list."""
        return [origin.strip() for origin in self.cors_allowed_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (FastAPI dependency)."""
    return Settings()


settings = get_settings()

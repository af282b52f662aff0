"""Application-wide configuration loaded from the environment."""

from __future__ import annotations

from functools import cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class GatewaySettings(BaseSettings):
    """Centralized settings for the users gateway service."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    supabase_url: str | None = None
    supabase_anon_key: str | None = None
    supabase_table: str = "users"
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_allow_origins: list[str] = ["*"]
    log_level: str = "INFO"

    @property
    def store_configured(self) -> bool:
        """Whether both backend store settings are present."""

        return bool(self.supabase_url) and bool(self.supabase_anon_key)


@cache
def get_settings() -> GatewaySettings:
    """Return the cached settings instance."""

    return GatewaySettings()


__all__ = ["GatewaySettings", "get_settings"]

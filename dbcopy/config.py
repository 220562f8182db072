"""
Replication configuration loaded from environment variables.
"""
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Replication settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # MongoDB (database name is taken from the URI path)
    src_uri: str = Field(default="")
    dst_uri: str = Field(default="")
    server_selection_timeout_ms: int = Field(default=5000)

    # Failure policy
    continue_on_error: bool = Field(default=False)

    # Logging
    log_level: str = Field(default="INFO")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

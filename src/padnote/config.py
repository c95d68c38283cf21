"""
App configuration - using pydantic settings for env vars
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """App settings - loads from .env file"""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # basic app stuff
    app_name: str = Field(default="Pad")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)  # set to True for dev

    # server config
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080)
    reload: bool = Field(default=False)

    # Storage
    storage_backend: Literal["redis", "memory"] = Field(
        default="redis", description="Backing store for counter and pad content"
    )
    redis_url: str = Field(default="redis://localhost:6379/0", description="Redis connection URL")
    redis_prefix: str = Field(default="pad", description="Namespace prefix for all keys")
    redis_max_connections: int = Field(default=10, description="Redis connection pool size")
    redis_socket_timeout: float = Field(default=5.0, description="Redis socket timeout in seconds")

    # Identifiers
    salt: str = Field(default="change-me-in-production", description="Hashids salt")
    hashid_min_length: int = Field(default=5, ge=0, description="Minimum identifier length")

    # Pads
    max_content_length: int = Field(
        default=1_000_000, description="Maximum pad content length in characters"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s", description="Log format"
    )
    log_dir: str = Field(default="", description="Directory for log files, empty disables them")

    # Environment
    environment: str = Field(default="development", description="Environment name")


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get application settings."""
    return settings

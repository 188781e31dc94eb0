"""Application settings via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables with GAMEHUB_ prefix."""

    model_config = SettingsConfigDict(
        env_prefix="GAMEHUB_",
        env_file=".env",
        case_sensitive=False,
    )

    # --- Core ---
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    rate_limit_requests: int = 100
    rate_limit_window_seconds: int = 60
    log_level: str = "INFO"
    log_format: str = "json"

    # --- Document store ---
    store_backend: str = "redis"  # redis | memory
    redis_url: str = "redis://localhost:6379/0"
    store_namespace: str = "demo-app"
    store_max_retries: int = 5


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()

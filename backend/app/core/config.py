"""Application configuration managed via environment variables."""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Studia Backend"
    debug: bool = False
    log_level: str = "INFO"
    timezone: str = "UTC"
    default_hours_per_day: float = 6.0
    opik_enabled: bool = False
    opik_api_key: str | None = None
    opik_project: str = "studia"
    opik_workspace: str | None = None


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()


settings = get_settings()

# app/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Required env vars (.env):
      - DATABASE_URL (SQLAlchemy connection string, Postgres in production)

    Optional:
      - ALLOWED_ORIGINS (comma-separated list of CORS origins)
      - LOG_LEVEL
      - DATABASE_ECHO (echo SQL statements, for debugging)
    """

    PROJECT_NAME: str = "Storefront API"
    API_PREFIX: str = "/api"

    DATABASE_URL: str
    DATABASE_ECHO: bool = False

    ALLOWED_ORIGINS: str = "http://localhost:5173"

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def allowed_origins(self) -> list[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()

"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Every setting can be overridden from the environment or a .env file
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - Defaults for every setting: `python -m app` works with no environment at all
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    service_name: str = "exercise-tracker-api"
    version: str = "1.0.0"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # API
    cors_origins: list[str] = ["*"]

    # Landing page
    views_dir: str = str(BASE_DIR / "views")
    static_dir: str = str(BASE_DIR / "public")

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()

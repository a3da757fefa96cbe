import os
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve paths relative to the project root (one level up from app/).
# This ensures the .env file is found regardless of where uvicorn is invoked.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


class Settings(BaseSettings):
    """Runtime settings, read from environment variables or the project's .env file."""

    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, ".env"), env_file_encoding="utf-8"
    )

    database_url: str = Field(
        default="sqlite:///./validation.db",
        description="SQLAlchemy URL of the database checked by the uniqueness rule",
        min_length=1,
    )
    log_level: str = Field(default="INFO", description="Root logging level")


@lru_cache
def get_settings() -> Settings:
    """Return the cached Settings instance."""
    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""
    get_settings.cache_clear()

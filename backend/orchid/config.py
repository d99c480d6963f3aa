"""Orchid Dashboard: application configuration via pydantic-settings."""
from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

# backend/orchid/config.py -> repository root
ROOT_DIR = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    """Environment configuration. Read once at startup."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Upstream REST backend (trailing slash expected, entity name is appended)
    API_URL: str = "http://localhost:8080/api/"
    HTTP_TIMEOUT_SECONDS: float = 10.0

    # Site origin and base path
    SITE: str = "http://localhost:4321"
    BASE_URL: str = "/"
    SITE_TITLE: str = "Orchid Dashboard"

    # Fixtures and mock data
    DATA_DIR: Path = ROOT_DIR / "data"
    RANDOMIZE: bool = False
    RANDOM_SEED: int | None = None

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:4321", "http://localhost:3000"]


@lru_cache
def get_settings() -> Settings:
    return Settings()

"""Application configuration via environment variables."""

from typing import Literal

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Validation
    VALIDATION_FATAL_LEVEL: Literal["fatal", "severe", "warning", "info", "minor"] = "fatal"
    VALIDATION_MAX_WORKERS: int = 1
    VALIDATE_ON_MAP: bool = True

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()

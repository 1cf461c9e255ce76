"""Application settings loaded from the environment and an optional .env file."""

import os
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

# ENV_FILE wins, then .env.{APP_ENV}, then .env
_env_file_from_env = os.getenv("ENV_FILE")
if _env_file_from_env:
    _ENV_FILE_PATH = Path(_env_file_from_env)
else:
    _candidate_specific = Path.cwd() / f".env.{os.getenv('APP_ENV', 'dev')}"
    _ENV_FILE_PATH = _candidate_specific if _candidate_specific.exists() else Path.cwd() / ".env"


class Settings(BaseSettings):
    """Runtime configuration for the natal chart service."""

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE_PATH,
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=False,
    )

    APP_NAME: str = "Natal Chart API"
    APP_VERSION: str = "1.0.0"
    APP_ENV: str = "dev"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    # Directory holding Swiss Ephemeris .se1 files; Moshier is used when unset
    EPHEMERIS_PATH: Optional[str] = None
    HOUSE_SYSTEM: str = "whole-sign"
    # Seed for the fallback trait pool of the personality summary
    TRAIT_SEED: Optional[int] = None


@lru_cache
def get_settings() -> Settings:
    return Settings()

# vocab_http_api/config.py

"""
Configuration for the vocabulary collector HTTP API.

Values are read from environment variables (and an optional ``.env`` file)
on top of the defaults below.

Typical usage
=============

    from vocab_http_api.config import settings

    engine = build_engine(settings.DATABASE_URL, echo=settings.DEBUG)
"""

from __future__ import annotations

from enum import Enum
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Central configuration registry, validated by pydantic.
    """

    # --- Application Meta ---
    APP_NAME: str = "vocabulary-collector"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- Persistence ---
    DATABASE_URL: str = "sqlite:///./vocabulary.db"
    SEED_LANGUAGES: bool = True

    # --- Server ---
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    RELOAD: bool = False

    # Comma-separated list; "*" allows any origin.
    CORS_ORIGINS: str = "*"

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def cors_origin_list(self) -> List[str]:
        """
        Parse ``CORS_ORIGINS`` into the list expected by ``CORSMiddleware``.
        """
        raw = (self.CORS_ORIGINS or "").strip()
        if not raw or raw == "*":
            return ["*"]
        return [part.strip() for part in raw.split(",") if part.strip()]

    @property
    def docs_enabled(self) -> bool:
        return self.APP_ENV != AppEnv.PRODUCTION


settings = Settings()


__all__ = ["AppEnv", "Settings", "settings"]

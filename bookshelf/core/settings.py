from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

load_dotenv()


def _as_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.lower() in {"1", "true", "t", "yes", "y", "on"}


class Settings(BaseModel):
    """Runtime configuration for the Bookshelf API."""

    app_title: str = Field(default="Bookshelf API", alias="APP_TITLE")
    database_url: str = Field(default="sqlite:///./bookshelf.db", alias="DATABASE_URL")
    database_echo: bool = Field(default=False, alias="DATABASE_ECHO")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = {"populate_by_name": True}

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: str | None) -> str:
        if not value:
            return "INFO"
        return value.upper()


@lru_cache
def get_settings() -> Settings:
    """Load application configuration from environment variables."""
    return Settings(
        app_title=os.getenv("APP_TITLE", "Bookshelf API"),
        database_url=os.getenv("DATABASE_URL", "sqlite:///./bookshelf.db"),
        database_echo=_as_bool(os.getenv("DATABASE_ECHO"), default=False),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )

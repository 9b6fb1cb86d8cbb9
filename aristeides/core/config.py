from __future__ import annotations

import logging
from functools import lru_cache
from typing import ClassVar

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BusSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ARISTEIDES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # env: dev|stage|prod
    APP_ENV: str = "dev"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # Dispatch
    # When False, commands issued by a handler through its bus handle skip the interceptor chain
    INTERCEPT_NESTED_COMMANDS: bool = True

    ALLOWED_ENVS: ClassVar[set[str]] = {"dev", "stage", "prod"}

    @field_validator("APP_ENV")
    @classmethod
    def validate_app_env(cls, value: str) -> str:
        """APP_ENV must name one of the known environments."""
        if value not in cls.ALLOWED_ENVS:
            raise ValueError(f"APP_ENV must be one of {sorted(cls.ALLOWED_ENVS)}, got '{value}'")
        return value

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        return resolve_log_level(value)


def resolve_log_level(value: object) -> str:
    """Normalize a logging level name ("debug" -> "DEBUG"); ValueError when unknown."""
    level = str(value).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"LOG_LEVEL must be a standard logging level name, got '{value}'")
    return level


@lru_cache(maxsize=1)
def get_settings() -> BusSettings:
    return BusSettings()


settings = get_settings()

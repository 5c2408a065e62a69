"""Engine configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    fallback_unit: str = "serving"
    debug: bool = False
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="PORTION_ENGINE_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

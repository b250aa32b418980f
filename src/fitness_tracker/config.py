"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from fitness_tracker.domain.workouts import DEFAULT_WORKOUT_COLOR

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    default_workout_color: str = DEFAULT_WORKOUT_COLOR
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    completion_api_key: str | None = None
    completion_base_url: str = "https://ai.gateway.lovable.dev/v1"
    completion_model: str = "google/gemini-2.5-flash"
    completion_timeout_seconds: float | None = 60.0
    timezone: str = "Asia/Kolkata"
    log_level: str = "INFO"
    reset_meal_log_on_goal_change: bool = True
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

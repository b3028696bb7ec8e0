"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    openai_api_key: str
    openai_model: str = "gpt-5.2"
    openai_consultant_model: str = "gpt-5.2"
    openai_reasoning_effort: str | None = "low"
    openai_consultant_reasoning_effort: str | None = "high"
    openai_store: bool = False
    openai_image_model: str = "gpt-image-1"
    openai_speech_model: str = "gpt-4o-mini-tts"
    openai_speech_voice: str = "alloy"
    openai_timeout_seconds: float = 60.0
    data_dir: Path = Path.home() / ".culinary_companion"
    image_cache_ttl_seconds: int = 86400
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

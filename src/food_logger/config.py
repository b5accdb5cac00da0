"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    openai_api_key: str
    openai_model: str = "gpt-4o"
    openai_timeout_seconds: float = 30.0
    transcription_model: str = "whisper-1"
    transcription_language: str | None = "en"
    extraction_temperature: float = 0.3
    extraction_max_tokens: int = 1000
    insight_temperature: float = 0.7
    insight_max_tokens: int = 300
    insight_timeout_seconds: float | None = 15.0
    insight_concurrency: int | None = None
    max_audio_bytes: int = 10 * 1024 * 1024
    allowed_audio_extensions: str = ".mp3,.wav,.m4a,.ogg,.aiff,.aif,.webm"
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_csv_setting(raw: str | None) -> tuple[str, ...]:
    """Split a comma-separated setting into lowercase, non-empty values."""
    if raw is None:
        return ()
    values: list[str] = []
    for chunk in raw.split(","):
        value = chunk.strip().lower()
        if value:
            values.append(value)
    return tuple(values)

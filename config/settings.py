from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database (user profiles)
    database_url: str = "sqlite:///recipe_assistant.db"

    # Speech recognition
    speech_language: str = "en-US"
    voice_input_mode: str = "push_to_talk"  # "push_to_talk" or "microphone"
    listen_timeout: Optional[float] = None  # None waits indefinitely for speech
    phrase_time_limit: Optional[float] = 15.0

    # Text-to-speech (edge-tts)
    voice_name: str = "en-US-AriaNeural"
    voice_rate: str = "+0%"

    log_level: str = "INFO"

    @property
    def is_sqlite(self) -> bool:
        """Whether the profile store is a SQLite database."""
        return self.database_url.startswith("sqlite")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()

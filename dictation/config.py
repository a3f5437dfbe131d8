"""Application configuration. Loads from env vars."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings. Override via environment variables."""

    # Transcription collaborator (hosted Whisper-compatible API; only hints are built here)
    TRANSCRIPTION_MODEL: str = "whisper-1"
    TRANSCRIPTION_LANGUAGE: str = ""  # empty = let the engine detect

    # Pronunciation dictionary
    DICTIONARY_KEYWORD_MAX_LENGTH: int = 255

    # Transcript history paging
    HISTORY_DEFAULT_LIMIT: int = 50
    HISTORY_MAX_LIMIT: int = 200

    # Session ids are uuid4 hex, truncated to this many chars
    SESSION_ID_LENGTH: int = 12

    # Logging: level (DEBUG, INFO, WARNING, ERROR); file path = also write logs to a file (empty = console only).
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = ""  # e.g. "logs/dictation.log"

    class Config:
        env_file = ".env"
        extra = "ignore"


def get_settings() -> Settings:
    return Settings()

"""Services: orchestration around the transcriber, dictionary and history."""
from .transcription_service import TranscriptionService

__all__ = ["TranscriptionService"]

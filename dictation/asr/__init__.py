"""ASR: transcriber interface and prompt hints."""
from .base import Transcriber, build_transcription_prompt

__all__ = ["Transcriber", "build_transcription_prompt"]

"""
Transcriber: abstract interface for the hosted speech-to-text collaborator.

Implementations take one recorded slice (encoded audio, e.g. webm/opus) plus
the user's dictionary hints and return plain text. Failures must surface as
TranscriptionError subclasses so the orchestrator can tell auth problems
from network problems.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from dictation.config import get_settings
from dictation.schemas.dictionary import DictionaryEntry

_PROMPT_INTRO = "Please transcribe the following audio accurately. "
_PROMPT_HINTS_HEADER = "Please use the following spellings for specific terms:\n"
_PROMPT_OUTRO = (
    "Provide a clear, well-formatted transcription with proper punctuation and capitalization."
)


def build_transcription_prompt(entries: Sequence[DictionaryEntry]) -> str:
    """Prompt sent alongside the audio; lists one spelling rule per dictionary entry."""
    prompt = _PROMPT_INTRO
    if entries:
        prompt += _PROMPT_HINTS_HEADER
        for entry in entries:
            prompt += f'- "{entry.keyword}" should be spelled as "{entry.spelling}"\n'
        prompt += "\n"
    return prompt + _PROMPT_OUTRO


class Transcriber(ABC):
    """
    Abstract speech-to-text engine.
    transcribe() is async; implementations must not block the event loop
    (run blocking HTTP or model work in an executor).
    """

    def __init__(self, model: Optional[str] = None, language: Optional[str] = None) -> None:
        settings = get_settings()
        self.model = model or settings.TRANSCRIPTION_MODEL
        # None = let the engine detect the language
        self.language = (language if language is not None else settings.TRANSCRIPTION_LANGUAGE) or None

    @abstractmethod
    async def transcribe(self, audio: bytes, hints: Sequence[DictionaryEntry]) -> str:
        """
        Transcribe one audio slice.
        Raises TranscriptionAuthError / TranscriptionNetworkError / TranscriptionError.
        """
        ...

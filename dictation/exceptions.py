"""
Error types for the dictation core.

The transcript merger never raises; everything here belongs to the
collaborators around it (dictionary, transcriber, orchestration).
Every error carries a stable error_code so callers can map it to a
transport status without string matching.
"""
from __future__ import annotations


class DictationError(Exception):
    """Base exception for the dictation package."""

    error_code: str = "DICTATION_ERROR"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"error_code": self.error_code, "message": self.message}


class InvalidAudioError(DictationError):
    """Audio payload missing or empty."""

    error_code = "INVALID_AUDIO"


# --- Transcriber collaborator ---


class TranscriptionError(DictationError):
    """Speech-to-text call failed."""

    error_code = "TRANSCRIPTION_FAILED"


class TranscriptionAuthError(TranscriptionError):
    """Credentials missing or rejected by the transcription API."""

    error_code = "TRANSCRIPTION_AUTH"


class TranscriptionNetworkError(TranscriptionError):
    """Network failure, timeout or 5xx from the transcription API."""

    error_code = "TRANSCRIPTION_NETWORK"


# --- Pronunciation dictionary ---


class DictionaryValidationError(DictationError):
    error_code = "DICTIONARY_INVALID"


class DuplicateKeywordError(DictationError):
    error_code = "DICTIONARY_DUPLICATE"

    def __init__(self, keyword: str) -> None:
        self.keyword = keyword
        super().__init__("A dictionary entry with this keyword already exists")


class EntryNotFoundError(DictationError):
    error_code = "DICTIONARY_NOT_FOUND"

    def __init__(self, entry_id: int) -> None:
        self.entry_id = entry_id
        super().__init__("Dictionary entry not found")


class EntryAccessDeniedError(DictationError):
    """Entry exists but belongs to another user."""

    error_code = "DICTIONARY_FORBIDDEN"

    def __init__(self, entry_id: int) -> None:
        self.entry_id = entry_id
        super().__init__("Dictionary entry belongs to another user")

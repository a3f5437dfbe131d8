from dictation.config import get_settings
from dictation.exceptions import DictationError, DuplicateKeywordError, TranscriptionAuthError, TranscriptionError


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("HISTORY_DEFAULT_LIMIT", "10")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    settings = get_settings()
    assert settings.HISTORY_DEFAULT_LIMIT == 10
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.DICTIONARY_KEYWORD_MAX_LENGTH == 255


def test_error_hierarchy():
    err = TranscriptionAuthError("OPENAI_API_KEY is not set")
    assert isinstance(err, TranscriptionError)
    assert isinstance(err, DictationError)
    assert err.to_dict() == {"error_code": "TRANSCRIPTION_AUTH", "message": "OPENAI_API_KEY is not set"}
    assert DuplicateKeywordError("ml").keyword == "ml"

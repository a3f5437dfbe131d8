from __future__ import annotations

import pytest

from dictation.dictionary import DictionaryStore
from dictation.session_store import clear_sessions
from dictation.transcript.history import TranscriptHistory


@pytest.fixture(autouse=True)
def _clean_sessions():
    clear_sessions()
    yield
    clear_sessions()


@pytest.fixture
def dictionary() -> DictionaryStore:
    return DictionaryStore(keyword_max_length=255)


@pytest.fixture
def history() -> TranscriptHistory:
    return TranscriptHistory(default_limit=50, max_limit=200)

"""Pydantic schemas shared by the dictionary, history and orchestration layers."""
from dictation.schemas.dictionary import DictionaryEntry, DictionaryRecord
from dictation.schemas.transcript import TranscriptPage, TranscriptRecord

__all__ = [
    "DictionaryEntry",
    "DictionaryRecord",
    "TranscriptPage",
    "TranscriptRecord",
]

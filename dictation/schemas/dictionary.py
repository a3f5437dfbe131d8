"""
Schemas for the per-user pronunciation dictionary.

An entry tells the transcriber how a spoken keyword should be spelled
(e.g. "kube cuttle" -> "kubectl"). Hints are the only part the transcriber sees.
"""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class DictionaryEntry(BaseModel):
    """One spelling hint passed to the transcriber."""

    keyword: str = Field(..., description="Term as it may be heard")
    spelling: str = Field(..., description="Spelling the transcript must use")


class DictionaryRecord(BaseModel):
    """Stored dictionary entry, owned by one user."""

    id: int
    user_id: int
    keyword: str
    spelling: str
    created_at: datetime
    updated_at: datetime

    def to_hint(self) -> DictionaryEntry:
        return DictionaryEntry(keyword=self.keyword, spelling=self.spelling)

"""Schemas for stored transcripts and history pages."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class TranscriptRecord(BaseModel):
    """One stored transcript. Every processed slice adds a record."""

    id: int
    user_id: int
    text: str = Field(..., description="Merged transcript at the time of the slice")
    session_id: str | None = Field(None, description="Recording session this text belongs to, if any")
    created_at: datetime


class TranscriptPage(BaseModel):
    """One page of a user's transcript history, newest first."""

    items: list[TranscriptRecord] = Field(default_factory=list)
    total: int = 0
    limit: int
    offset: int = 0
    has_more: bool = False

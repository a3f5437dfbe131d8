"""
TranscriptHistory: append-only per-user list of stored transcripts.

Every processed slice adds one record holding the merged text at that point,
so a session's latest record is always its full transcript. Records are
never updated in place.
"""
from __future__ import annotations

import itertools
import logging
from datetime import datetime, timezone
from typing import Optional

from dictation.config import get_settings
from dictation.schemas.transcript import TranscriptPage, TranscriptRecord

logger = logging.getLogger(__name__)


class TranscriptHistory:
    def __init__(self, default_limit: Optional[int] = None, max_limit: Optional[int] = None) -> None:
        settings = get_settings()
        self._default_limit = default_limit if default_limit is not None else settings.HISTORY_DEFAULT_LIMIT
        self._max_limit = max_limit if max_limit is not None else settings.HISTORY_MAX_LIMIT
        self._records: dict[int, list[TranscriptRecord]] = {}
        self._ids = itertools.count(1)

    def add(self, user_id: int, text: str, session_id: Optional[str] = None) -> TranscriptRecord:
        record = TranscriptRecord(
            id=next(self._ids),
            user_id=user_id,
            text=text,
            session_id=session_id,
            created_at=datetime.now(timezone.utc),
        )
        self._records.setdefault(user_id, []).append(record)
        logger.debug("Transcript %s stored for user %s (session=%s, %s chars)", record.id, user_id, session_id, len(text))
        return record

    def latest_for_session(self, user_id: int, session_id: str) -> Optional[TranscriptRecord]:
        for record in reversed(self._records.get(user_id, [])):
            if record.session_id == session_id:
                return record
        return None

    def list(self, user_id: int, limit: Optional[int] = None, offset: int = 0) -> TranscriptPage:
        """Newest first. limit is clamped to 1..max_limit; negative offset counts as 0."""
        if limit is None:
            limit = self._default_limit
        limit = max(1, min(limit, self._max_limit))
        offset = max(0, offset)
        newest_first = list(reversed(self._records.get(user_id, [])))
        total = len(newest_first)
        return TranscriptPage(
            items=newest_first[offset : offset + limit],
            total=total,
            limit=limit,
            offset=offset,
            has_more=offset + limit < total,
        )

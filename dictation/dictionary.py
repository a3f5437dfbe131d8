"""
Per-user pronunciation dictionary.

Entries are spelling hints for the transcriber. Keywords are unique per user
(exact match after stripping). Values are stripped before storage.
"""
from __future__ import annotations

import itertools
import logging
from datetime import datetime, timezone
from typing import Optional

from dictation.config import get_settings
from dictation.exceptions import (
    DictionaryValidationError,
    DuplicateKeywordError,
    EntryAccessDeniedError,
    EntryNotFoundError,
)
from dictation.schemas.dictionary import DictionaryEntry, DictionaryRecord

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def validate_entry(keyword: Optional[str], spelling: Optional[str], max_length: int) -> tuple[str, str]:
    """Return (keyword, spelling) stripped, or raise DictionaryValidationError."""
    if not keyword or not spelling:
        raise DictionaryValidationError("Keyword and spelling are required")
    if not keyword.strip() or not spelling.strip():
        raise DictionaryValidationError("Keyword and spelling cannot be empty")
    if len(keyword) > max_length:
        raise DictionaryValidationError(f"Keyword must be {max_length} characters or less")
    return keyword.strip(), spelling.strip()


class DictionaryStore:
    """In-memory dictionary for all users. Ids are global and increasing."""

    def __init__(self, keyword_max_length: Optional[int] = None) -> None:
        self._max_length = (
            keyword_max_length if keyword_max_length is not None else get_settings().DICTIONARY_KEYWORD_MAX_LENGTH
        )
        self._entries: dict[int, DictionaryRecord] = {}
        self._ids = itertools.count(1)

    def _get_owned(self, user_id: int, entry_id: int) -> DictionaryRecord:
        record = self._entries.get(entry_id)
        if record is None:
            raise EntryNotFoundError(entry_id)
        if record.user_id != user_id:
            logger.warning("User %s tried to access dictionary entry %s of user %s", user_id, entry_id, record.user_id)
            raise EntryAccessDeniedError(entry_id)
        return record

    def _check_unique(self, user_id: int, keyword: str, exclude_id: Optional[int] = None) -> None:
        for record in self._entries.values():
            if record.user_id == user_id and record.keyword == keyword and record.id != exclude_id:
                raise DuplicateKeywordError(keyword)

    def list_entries(self, user_id: int) -> list[DictionaryRecord]:
        """User's entries ordered by keyword."""
        return sorted(
            (r for r in self._entries.values() if r.user_id == user_id),
            key=lambda r: r.keyword,
        )

    def hints_for(self, user_id: int) -> list[DictionaryEntry]:
        return [r.to_hint() for r in self.list_entries(user_id)]

    def add_entry(self, user_id: int, keyword: Optional[str], spelling: Optional[str]) -> DictionaryRecord:
        keyword, spelling = validate_entry(keyword, spelling, self._max_length)
        self._check_unique(user_id, keyword)
        now = _utcnow()
        record = DictionaryRecord(
            id=next(self._ids),
            user_id=user_id,
            keyword=keyword,
            spelling=spelling,
            created_at=now,
            updated_at=now,
        )
        self._entries[record.id] = record
        logger.info("Dictionary entry %s added for user %s", record.id, user_id)
        return record

    def update_entry(
        self,
        user_id: int,
        entry_id: int,
        keyword: Optional[str],
        spelling: Optional[str],
    ) -> DictionaryRecord:
        keyword, spelling = validate_entry(keyword, spelling, self._max_length)
        current = self._get_owned(user_id, entry_id)
        self._check_unique(user_id, keyword, exclude_id=entry_id)
        record = current.model_copy(update={"keyword": keyword, "spelling": spelling, "updated_at": _utcnow()})
        self._entries[entry_id] = record
        logger.info("Dictionary entry %s updated for user %s", entry_id, user_id)
        return record

    def delete_entry(self, user_id: int, entry_id: int) -> None:
        self._get_owned(user_id, entry_id)
        del self._entries[entry_id]
        logger.info("Dictionary entry %s deleted for user %s", entry_id, user_id)

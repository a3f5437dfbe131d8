"""
TranscriptionService: turns one recorded slice into a stored transcript.

Flow per slice: load the user's dictionary hints -> transcribe -> when the
slice belongs to a session, merge with the session's running transcript ->
update the session -> append a history record.

Slices of one session are processed one at a time (asyncio.Lock per session);
otherwise two concurrent slices would both merge against the same prior text
and one of them would be lost. The merger itself holds no state.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Optional

from dictation.asr.base import Transcriber
from dictation.dictionary import DictionaryStore
from dictation.exceptions import InvalidAudioError, TranscriptionError
from dictation.schemas.transcript import TranscriptRecord
from dictation.session_store import (
    delete_session,
    ensure_session,
    generate_session_id,
    get_session,
    update_session_transcript,
)
from dictation.transcript.history import TranscriptHistory
from dictation.transcript.merger import merge_transcriptions

logger = logging.getLogger(__name__)


class TranscriptionService:
    def __init__(
        self,
        transcriber: Transcriber,
        dictionary: DictionaryStore,
        history: TranscriptHistory,
    ) -> None:
        self._transcriber = transcriber
        self._dictionary = dictionary
        self._history = history
        self._session_locks: dict[tuple[int, str], asyncio.Lock] = {}

    def _lock_for(self, user_id: int, session_id: str) -> asyncio.Lock:
        key = (user_id, session_id)
        lock = self._session_locks.get(key)
        if lock is None:
            lock = asyncio.Lock()
            self._session_locks[key] = lock
        return lock

    def _existing_text(self, user_id: int, session_id: str) -> str:
        """Running transcript of the session; falls back to the latest stored record."""
        session = get_session(user_id, session_id)
        if session and session.get("transcript_text"):
            return session["transcript_text"]
        latest = self._history.latest_for_session(user_id, session_id)
        return latest.text if latest else ""

    async def _transcribe(self, user_id: int, audio: bytes) -> str:
        hints = self._dictionary.hints_for(user_id)
        try:
            text = await self._transcriber.transcribe(audio, hints)
        except TranscriptionError as e:
            logger.warning("Transcription failed for user %s (%s): %s", user_id, e.error_code, e.message)
            raise
        except Exception as e:
            logger.exception("Transcriber raised unexpected error for user %s", user_id)
            raise TranscriptionError(f"Transcription failed: {e}") from e
        return (text or "").strip()

    async def transcribe_slice(
        self,
        user_id: int,
        audio: bytes,
        session_id: Optional[str] = None,
    ) -> TranscriptRecord:
        """Transcribe one slice and store the (merged) result. Returns the new history record."""
        if not audio:
            raise InvalidAudioError("Audio file is required")

        if not session_id:
            text = await self._transcribe(user_id, audio)
            return self._history.add(user_id, text)

        async with self._lock_for(user_id, session_id):
            new_text = await self._transcribe(user_id, audio)
            existing = self._existing_text(user_id, session_id)
            merged = merge_transcriptions([existing, new_text]) if existing else new_text
            update_session_transcript(user_id, session_id, merged)
            record = self._history.add(user_id, merged, session_id=session_id)
        logger.info(
            "Session %s: slice merged (%s -> %s chars)", session_id, len(existing), len(merged)
        )
        return record

    def start_session(self, user_id: int) -> str:
        """Open a new recording session and return its id; slices of that recording pass it along."""
        session_id = generate_session_id()
        ensure_session(user_id, session_id)
        logger.info("Session %s started for user %s", session_id, user_id)
        return session_id

    def end_session(self, user_id: int, session_id: str) -> None:
        """
        Drop the running transcript once recording has stopped; history keeps the records.
        The lock stays while a slice still holds it, so a late slice cannot race it.
        """
        delete_session(user_id, session_id)
        key = (user_id, session_id)
        lock = self._session_locks.get(key)
        if lock is not None and not lock.locked():
            del self._session_locks[key]
        logger.info("Session %s ended for user %s", session_id, user_id)

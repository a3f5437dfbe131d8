"""
In-memory store of running transcripts, one per recording session.

A session is created by the client when recording starts; every slice of that
recording carries the same session_id. Keys are (user_id, session_id) so one
user can never read or extend another user's session.
"""
from __future__ import annotations

import time
import uuid
from typing import Any

from dictation.config import get_settings

# (user_id, session_id) -> {
#   "transcript_text": str,   # merged transcript so far
#   "slice_count": int,       # slices merged into transcript_text
#   "created_at": float,
#   "updated_at": float,
# }
_session_store: dict[tuple[int, str], dict[str, Any]] = {}


def generate_session_id() -> str:
    """Generate a new session_id (uuid4 hex, truncated to SESSION_ID_LENGTH)."""
    return uuid.uuid4().hex[: get_settings().SESSION_ID_LENGTH]


def get_session(user_id: int, session_id: str) -> dict[str, Any] | None:
    """Return session dict or None if not found."""
    return _session_store.get((user_id, session_id))


def ensure_session(user_id: int, session_id: str) -> dict[str, Any]:
    """Create session if it does not exist; return it."""
    key = (user_id, session_id)
    if key not in _session_store:
        now = time.time()
        _session_store[key] = {
            "transcript_text": "",
            "slice_count": 0,
            "created_at": now,
            "updated_at": now,
        }
    return _session_store[key]


def update_session_transcript(user_id: int, session_id: str, transcript_text: str) -> None:
    """Replace the running transcript after a slice has been merged. Creates the session if needed."""
    s = ensure_session(user_id, session_id)
    s["transcript_text"] = transcript_text
    s["slice_count"] += 1
    s["updated_at"] = time.time()


def delete_session(user_id: int, session_id: str) -> bool:
    """Remove session from store. Return True if it existed."""
    return _session_store.pop((user_id, session_id), None) is not None


def clear_sessions() -> None:
    """Drop every session (used on shutdown and between tests)."""
    _session_store.clear()


def session_store() -> dict[tuple[int, str], dict[str, Any]]:
    """Return the underlying store (read-only view for debugging)."""
    return _session_store

from dictation.session_store import (
    delete_session,
    ensure_session,
    generate_session_id,
    get_session,
    session_store,
    update_session_transcript,
)


def test_generate_session_id():
    first, second = generate_session_id(), generate_session_id()
    assert len(first) == 12
    assert first != second


def test_session_is_keyed_by_user():
    update_session_transcript(1, "abc", "hello")
    assert get_session(1, "abc")["transcript_text"] == "hello"
    assert get_session(2, "abc") is None


def test_update_counts_slices():
    ensure_session(1, "abc")
    update_session_transcript(1, "abc", "one")
    update_session_transcript(1, "abc", "one two")
    session = get_session(1, "abc")
    assert session["slice_count"] == 2
    assert session["transcript_text"] == "one two"
    assert session["updated_at"] >= session["created_at"]


def test_ensure_does_not_reset():
    update_session_transcript(1, "abc", "kept")
    ensure_session(1, "abc")
    assert get_session(1, "abc")["transcript_text"] == "kept"


def test_delete_session():
    ensure_session(1, "abc")
    assert delete_session(1, "abc") is True
    assert delete_session(1, "abc") is False
    assert session_store() == {}

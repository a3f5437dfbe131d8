"""Tests for the per-user pronunciation dictionary."""
import pytest

from dictation.dictionary import DictionaryStore
from dictation.exceptions import (
    DictionaryValidationError,
    DuplicateKeywordError,
    EntryAccessDeniedError,
    EntryNotFoundError,
)
from dictation.schemas.dictionary import DictionaryEntry


def test_add_strips_values(dictionary):
    record = dictionary.add_entry(1, "  kube cuttle ", " kubectl ")
    assert record.keyword == "kube cuttle"
    assert record.spelling == "kubectl"
    assert record.user_id == 1
    assert record.created_at == record.updated_at


def test_list_is_sorted_by_keyword_and_per_user(dictionary):
    dictionary.add_entry(1, "postgres", "PostgreSQL")
    dictionary.add_entry(1, "fast api", "FastAPI")
    dictionary.add_entry(2, "django", "Django")

    assert [r.keyword for r in dictionary.list_entries(1)] == ["fast api", "postgres"]
    assert [r.keyword for r in dictionary.list_entries(2)] == ["django"]
    assert dictionary.list_entries(3) == []


def test_hints_for_returns_entries(dictionary):
    dictionary.add_entry(1, "pie test", "pytest")
    assert dictionary.hints_for(1) == [DictionaryEntry(keyword="pie test", spelling="pytest")]


@pytest.mark.parametrize(
    "keyword,spelling",
    [(None, "x"), ("x", None), ("", "x"), ("x", ""), ("   ", "x"), ("x", "\t")],
)
def test_rejects_missing_or_blank_values(dictionary, keyword, spelling):
    with pytest.raises(DictionaryValidationError):
        dictionary.add_entry(1, keyword, spelling)


def test_rejects_long_keyword():
    store = DictionaryStore(keyword_max_length=5)
    store.add_entry(1, "abcde", "ok")
    with pytest.raises(DictionaryValidationError, match="5 characters or less"):
        store.add_entry(1, "abcdef", "too long")


def test_duplicate_keyword_same_user(dictionary):
    dictionary.add_entry(1, "ml", "machine learning")
    with pytest.raises(DuplicateKeywordError):
        dictionary.add_entry(1, " ml ", "ML")
    # another user may reuse it
    dictionary.add_entry(2, "ml", "ML")


def test_update_entry(dictionary):
    record = dictionary.add_entry(1, "jason", "JSON")
    updated = dictionary.update_entry(1, record.id, "jay son", "JSON")
    assert updated.id == record.id
    assert updated.keyword == "jay son"
    assert updated.created_at == record.created_at
    assert updated.updated_at >= record.updated_at
    assert dictionary.list_entries(1) == [updated]


def test_update_keeps_own_keyword(dictionary):
    record = dictionary.add_entry(1, "jason", "JSON")
    assert dictionary.update_entry(1, record.id, "jason", "Json").spelling == "Json"


def test_update_to_existing_keyword_fails(dictionary):
    dictionary.add_entry(1, "a", "A")
    second = dictionary.add_entry(1, "b", "B")
    with pytest.raises(DuplicateKeywordError):
        dictionary.update_entry(1, second.id, "a", "A2")


def test_update_and_delete_check_ownership(dictionary):
    record = dictionary.add_entry(1, "k8s", "Kubernetes")
    with pytest.raises(EntryAccessDeniedError):
        dictionary.update_entry(2, record.id, "k8s", "K8s")
    with pytest.raises(EntryAccessDeniedError):
        dictionary.delete_entry(2, record.id)
    with pytest.raises(EntryNotFoundError):
        dictionary.delete_entry(1, 999)


def test_delete_entry(dictionary):
    record = dictionary.add_entry(1, "k8s", "Kubernetes")
    dictionary.delete_entry(1, record.id)
    assert dictionary.list_entries(1) == []
    with pytest.raises(EntryNotFoundError):
        dictionary.update_entry(1, record.id, "k8s", "Kubernetes")

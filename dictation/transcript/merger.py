"""
Transcript merger: stitch overlapping transcription fragments into one text.

Audio is sliced by time, not by utterance, so consecutive slices overlap and
each fragment usually repeats the tail of the previous one. Overlap is found
on whole words: the longest run of words that ends the earlier text and
starts the later one, compared case-insensitively. Output keeps the casing
and punctuation of the input.

Both functions are pure: no I/O, no state between calls, never raise.
"""
from __future__ import annotations

from typing import Sequence


def _words(text: str) -> list[str]:
    # Blank text is one empty word, so two blank texts overlap fully.
    return text.strip().split() or [""]


def remove_overlap(text1: str, text2: str) -> str:
    """
    Return the part of text1 that is not repeated at the start of text2.

    A single trailing space is kept as separator, so ``remove_overlap(a, b) + b``
    is the joined text. Returns "" when text2 repeats all of text1.
    When either input is empty, text1 is returned untouched.
    """
    if not text1 or not text2:
        return text1

    words1 = _words(text1.lower())
    words2 = _words(text2.lower())

    # Largest match wins; keep scanning after the first hit.
    max_overlap = 0
    for i in range(1, min(len(words1), len(words2)) + 1):
        if " ".join(words1[-i:]) == " ".join(words2[:i]):
            max_overlap = i

    if max_overlap > 0:
        original_words = _words(text1)
        keep_count = len(original_words) - max_overlap
        if keep_count > 0:
            return " ".join(original_words[:keep_count]) + " "
        return ""

    return text1.strip() + " "


def merge_transcriptions(transcriptions: Sequence[str]) -> str:
    """Left-fold fragments in order, dropping the words each one repeats."""
    if not transcriptions:
        return ""
    if len(transcriptions) == 1:
        return transcriptions[0].strip()

    merged = transcriptions[0].strip()
    for fragment in transcriptions[1:]:
        current = fragment.strip()
        if not current:
            continue
        merged = remove_overlap(merged, current) + current

    return merged.strip()

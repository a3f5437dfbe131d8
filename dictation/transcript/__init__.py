"""Transcript handling: overlap-aware merging of slices and stored history."""
from .history import TranscriptHistory
from .merger import merge_transcriptions, remove_overlap

__all__ = ["TranscriptHistory", "merge_transcriptions", "remove_overlap"]

"""Voice dictation core: overlap-aware transcript merging and its collaborators."""
from dictation.transcript.merger import merge_transcriptions, remove_overlap

__version__ = "0.1.0"

__all__ = ["merge_transcriptions", "remove_overlap", "__version__"]

"""Timeline analyzers: disfluency, pauses, pacing and vocabulary matching."""

from .disfluency import (
    DEFAULT_LEXICON,
    FillerLexicon,
    WordContext,
    classify_disfluencies,
    is_filler_word,
)
from .pace import pace_timeline, rolling_words_per_minute, words_per_minute
from .pauses import segment_pauses, summarize_pauses
from .vocabulary import build_vocabulary_pattern, find_vocabulary_matches, inflected_forms

__all__ = [
    "DEFAULT_LEXICON",
    "FillerLexicon",
    "WordContext",
    "build_vocabulary_pattern",
    "classify_disfluencies",
    "find_vocabulary_matches",
    "inflected_forms",
    "is_filler_word",
    "pace_timeline",
    "rolling_words_per_minute",
    "segment_pauses",
    "summarize_pauses",
    "words_per_minute",
]

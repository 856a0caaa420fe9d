"""Token normalization and sentence segmentation shared by analyzers."""

from __future__ import annotations

import string
from collections.abc import Sequence

from speakup.domain import TimedWord

TERMINAL_PUNCTUATION = (".", "?", "!")
SENTENCE_BREAK_GAP_SECONDS = 0.8

_STRIP_CHARACTERS = string.punctuation + "…“”‘’¿¡"

STOPWORDS: frozenset[str] = frozenset(
    {
        "a", "about", "after", "all", "also", "am", "an", "and", "any", "are",
        "as", "at", "be", "because", "been", "before", "being", "but", "by",
        "can", "could", "did", "do", "does", "doing", "for", "from", "get",
        "got", "had", "has", "have", "having", "he", "her", "here", "hers",
        "him", "his", "how", "i", "if", "in", "into", "is", "it", "its",
        "just", "me", "might", "more", "most", "my", "no", "not", "of", "on",
        "one", "or", "our", "out", "over", "said", "say", "she", "should",
        "so", "some", "such", "than", "that", "the", "their", "them", "then",
        "there", "these", "they", "this", "those", "to", "too", "up", "us",
        "very", "was", "we", "were", "what", "when", "where", "which", "while",
        "who", "why", "will", "with", "would", "you", "your", "make", "made",
        "may", "shall", "im", "it's", "i'm", "don't", "dont",
    }
)


def normalize_token(text: str) -> str:
    """Lowercases a token and strips surrounding punctuation."""
    return text.strip().lower().strip(_STRIP_CHARACTERS)


def ends_sentence(text: str) -> bool:
    """Returns whether a raw token carries sentence-ending punctuation."""
    return text.rstrip().rstrip("\"')”’").endswith(TERMINAL_PUNCTUATION)


def is_content_word(token: str) -> bool:
    """Returns whether a normalized token carries content (not a stopword)."""
    return len(token) >= 3 and token.isalpha() and token not in STOPWORDS


def split_sentences(
    words: Sequence[TimedWord],
    *,
    break_gap_seconds: float = SENTENCE_BREAK_GAP_SECONDS,
) -> list[list[TimedWord]]:
    """Groups words into sentences at terminal punctuation or long silences."""
    sentences: list[list[TimedWord]] = []
    current: list[TimedWord] = []
    for index, word in enumerate(words):
        if current and word.start - words[index - 1].end > break_gap_seconds:
            sentences.append(current)
            current = []
        current.append(word)
        if ends_sentence(word.text):
            sentences.append(current)
            current = []
    if current:
        sentences.append(current)
    return sentences


def transcript_text(words: Sequence[TimedWord]) -> str:
    """Joins timeline words into a single space-separated transcript."""
    return " ".join(word.text for word in words)

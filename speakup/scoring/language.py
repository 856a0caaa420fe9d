"""Vocabulary and sentence-structure subscores."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Sequence

from speakup.analysis.text import normalize_token, split_sentences, transcript_text
from speakup.analysis.vocabulary import find_vocabulary_matches
from speakup.domain import TimedWord
from speakup.scoring.subscores import clamp_score

MIN_LANGUAGE_WORDS = 10
LONG_WORD_LENGTH = 7
TARGET_UNIQUE_RATIO = 0.7
TARGET_LONG_WORD_RATIO = 0.2
REPEATED_PHRASE_MIN_OCCURRENCES = 3

SHORT_SENTENCE_WORDS = 3
RUN_ON_SENTENCE_WORDS = 40

RESTART_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(pattern)
    for pattern in (
        r"\blet me rephrase\b",
        r"\blet me start over\b",
        r"\bwhat i meant\b",
        r"\bwhat i mean is\b",
        r"\bi mean\b",
        r"\bno wait\b",
        r"\bsorry i\b",
        r"\bactually no\b",
        r"\bscratch that\b",
        r"\b(\w+) \1\b",
    )
)


def _spoken_tokens(words: Sequence[TimedWord]) -> list[str]:
    tokens = [normalize_token(word.text) for word in words if not word.is_filler]
    return [token for token in tokens if token]


def count_repeated_phrases(tokens: Sequence[str]) -> int:
    """Counts distinct 2-3 word phrases repeated at least three times."""
    repeated = 0
    for size in (2, 3):
        grams = Counter(
            tuple(tokens[index : index + size]) for index in range(len(tokens) - size + 1)
        )
        repeated += sum(
            1 for count in grams.values() if count >= REPEATED_PHRASE_MIN_OCCURRENCES
        )
    return repeated


def vocabulary_score(
    words: Sequence[TimedWord],
    *,
    target_vocabulary: Sequence[str] = (),
) -> int | None:
    """Scores lexical variety, word length and use of practiced vocabulary.

    Returns ``None`` when fewer than ten non-filler words were spoken.
    """
    tokens = _spoken_tokens(words)
    if len(tokens) < MIN_LANGUAGE_WORDS:
        return None

    unique_ratio = len(set(tokens)) / len(tokens)
    long_ratio = sum(1 for token in tokens if len(token) >= LONG_WORD_LENGTH) / len(tokens)
    raw = 0.6 * min(100.0, unique_ratio / TARGET_UNIQUE_RATIO * 100.0) + 0.4 * min(
        100.0, long_ratio / TARGET_LONG_WORD_RATIO * 100.0
    )
    raw -= min(30.0, 8.0 * count_repeated_phrases(tokens))

    if target_vocabulary:
        detected = find_vocabulary_matches(" ".join(tokens), target_vocabulary)
        raw += min(15.0, 5.0 * len(detected))
    return clamp_score(raw)


def count_restarts(text: str) -> int:
    """Counts self-correction phrases and immediate word repetitions."""
    tokens = (normalize_token(token) for token in text.split())
    lowered = " ".join(token for token in tokens if token)
    return sum(len(pattern.findall(lowered)) for pattern in RESTART_PATTERNS)


def structure_score(words: Sequence[TimedWord]) -> int | None:
    """Penalizes fragmented, self-correcting and run-on sentence structure.

    Returns ``None`` when fewer than ten words were spoken.
    """
    if len(words) < MIN_LANGUAGE_WORDS:
        return None
    sentences = split_sentences(words)
    lengths = [len(sentence) for sentence in sentences]

    score = 100.0
    short_ratio = sum(1 for length in lengths if length < SHORT_SENTENCE_WORDS) / len(
        lengths
    )
    if short_ratio > 0.3:
        score -= min(25.0, (short_ratio - 0.3) * 80.0)

    score -= min(25.0, 5.0 * count_restarts(transcript_text(words)))

    run_ons = sum(1 for length in lengths if length > RUN_ON_SENTENCE_WORDS)
    score -= min(30.0, 10.0 * run_ons)

    average_length = sum(lengths) / len(lengths)
    if average_length < 4.0 or average_length > 30.0:
        score -= 10.0
    return clamp_score(score)

"""Prompt relevance and free-speech coherence subscores.

Semantic similarity comes from an injected provider so the engine stays
independent of any particular embedding model.
"""

from __future__ import annotations

from typing import TypeAlias

import re
from collections.abc import Callable, Sequence

from speakup.analysis.text import (
    is_content_word,
    normalize_token,
    split_sentences,
    transcript_text,
)
from speakup.domain import TimedWord
from speakup.scoring.subscores import clamp_score

SimilarityProvider: TypeAlias = Callable[[str, str], float | None]

MIN_PROMPT_WORDS = 10
MIN_COHERENCE_WORDS = 20
MAX_TRANSCRIPT_KEYWORDS = 100

OVERLAP_WEIGHT = 0.4
SEMANTIC_WEIGHT = 0.6

CONNECTIVES: tuple[str, ...] = (
    "however", "therefore", "because", "although", "furthermore",
    "moreover", "consequently", "nevertheless", "for example",
    "for instance", "in addition", "on the other hand",
    "in contrast", "as a result", "in conclusion",
    "first", "second", "third", "finally",
    "similarly", "meanwhile", "instead", "otherwise", "specifically",
    "then", "but", "and", "yet", "while", "since", "thus",
    "hence", "accordingly", "rather", "indeed",
)
_CONNECTIVE_PATTERNS = tuple(
    (connective, re.compile(rf"\b{re.escape(connective)}\b")) for connective in CONNECTIVES
)


def content_words(text: str, *, limit: int | None = None) -> list[str]:
    """Extracts normalized content words in order of appearance."""
    tokens = [normalize_token(token) for token in text.split()]
    words = [token for token in tokens if is_content_word(token)]
    return words if limit is None else words[:limit]


def _similarity(provider: SimilarityProvider, first: str, second: str) -> float | None:
    value = provider(first, second)
    if value is None:
        return None
    return min(1.0, max(0.0, float(value)))


def _best_match_similarity(
    sources: Sequence[str],
    candidates: Sequence[str],
    provider: SimilarityProvider,
) -> float | None:
    """Mean over sources of the best similarity to any candidate word."""
    total = 0.0
    counted = 0
    for source in dict.fromkeys(sources):
        best: float | None = None
        for candidate in dict.fromkeys(candidates):
            similarity = _similarity(provider, source, candidate)
            if similarity is not None and (best is None or similarity > best):
                best = similarity
        if best is not None:
            total += best
            counted += 1
    if counted == 0:
        return None
    return total / counted


def prompt_relevance(
    prompt_text: str,
    transcript: str,
    *,
    similarity: SimilarityProvider | None = None,
) -> int | None:
    """Scores how well a transcript addresses a prompt.

    Returns ``None`` when the prompt or transcript has too few content words.
    """
    prompt_keywords = content_words(prompt_text)
    transcript_keywords = content_words(transcript, limit=MAX_TRANSCRIPT_KEYWORDS)
    if len(set(prompt_keywords)) < 2 or len(transcript_keywords) < 3:
        return None

    prompt_set = set(prompt_keywords)
    overlap = len(prompt_set & set(transcript_keywords)) / len(prompt_set)
    semantic = (
        _best_match_similarity(prompt_keywords, transcript_keywords, similarity)
        if similarity is not None
        else None
    )
    if semantic is None:
        raw = overlap
    else:
        raw = OVERLAP_WEIGHT * overlap + SEMANTIC_WEIGHT * semantic
    return clamp_score(raw * 100.0)


def _jaccard_consistency(sentence_keywords: Sequence[list[str]]) -> float:
    total = 0.0
    pairs = 0
    for current, following in zip(sentence_keywords, sentence_keywords[1:]):
        union = set(current) | set(following)
        if not union:
            continue
        total += len(set(current) & set(following)) / len(union)
        pairs += 1
    if pairs == 0:
        return 0.5
    return min(1.0, total / pairs * 3.0)


def _topic_consistency(
    sentence_keywords: Sequence[list[str]],
    similarity: SimilarityProvider | None,
) -> float:
    if similarity is None:
        return _jaccard_consistency(sentence_keywords)
    total = 0.0
    pairs = 0
    for current, following in zip(sentence_keywords, sentence_keywords[1:]):
        if not current or not following:
            continue
        pair_similarity = _best_match_similarity(current, following, similarity)
        if pair_similarity is not None:
            total += pair_similarity
            pairs += 1
    if pairs == 0:
        return 0.5
    # Adjacent-sentence similarity around 0.3-0.5 already reads as on-topic.
    return min(1.0, total / pairs * 1.5)


def connective_usage(transcript: str) -> float:
    """Rewards variety and frequency of discourse connectives (0-1)."""
    lowered = " ".join(normalize_token(token) for token in transcript.split())
    if len(lowered.split()) < 10:
        return 0.5
    found: set[str] = set()
    total = 0
    for connective, pattern in _CONNECTIVE_PATTERNS:
        occurrences = len(pattern.findall(lowered))
        if occurrences:
            found.add(connective)
            total += occurrences
    variety = min(1.0, len(found) / 6.0)
    frequency = min(1.0, total / 8.0)
    return variety * 0.7 + frequency * 0.3


def coherence_score(
    words: Sequence[TimedWord],
    *,
    similarity: SimilarityProvider | None = None,
) -> int | None:
    """Scores topical continuity and argument structure without a prompt."""
    sentences = split_sentences(words)
    if len(sentences) < 2:
        return None
    sentence_keywords = [content_words(transcript_text(sentence)) for sentence in sentences]
    topic = _topic_consistency(sentence_keywords, similarity)
    structure = connective_usage(transcript_text(words))
    return clamp_score((topic * 0.5 + structure * 0.5) * 100.0)


def relevance_score(
    words: Sequence[TimedWord],
    *,
    prompt_text: str | None,
    similarity: SimilarityProvider | None = None,
) -> int | None:
    """Prompt relevance when a prompt exists, otherwise coherence.

    Args:
        words: Classified timeline; fillers are excluded from the text.
        prompt_text: Prompt the speaker answered, if any.
        similarity: Optional word-similarity provider.

    Returns:
        A 0-100 score, or ``None`` when the transcript is too short.
    """
    spoken = [word for word in words if not word.is_filler]
    if prompt_text and prompt_text.strip() and len(spoken) >= MIN_PROMPT_WORDS:
        score = prompt_relevance(prompt_text, transcript_text(spoken), similarity=similarity)
        if score is not None:
            return score
    if len(spoken) >= MIN_COHERENCE_WORDS:
        return coherence_score(spoken, similarity=similarity)
    return None
